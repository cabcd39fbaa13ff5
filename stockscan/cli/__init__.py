"""Command-line interface for stockscan.

Usage:
    stockscan parse [file] [--format text|json] [--config rules.toml]
    stockscan serve [--host] [--port]
"""
