#!/usr/bin/env python3

import argparse
from collections.abc import Callable, Sequence


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Run a command handler that may call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt item extraction CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse [file]               Parse OCR text (file or stdin) into items
  serve [--host] [--port]    Start the HTTP parse server

Notes:
  Output is a proposal; review every item before saving it to inventory.
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse OCR receipt text")
    parse_parser.add_argument("file", nargs="?", default=None, help="OCR text file (default: stdin)")
    parse_parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format (default: text)"
    )
    parse_parser.add_argument("--config", default=None, help="Parser rules TOML override")
    parse_parser.add_argument("-v", "--verbose", action="store_true", help="Log every rejected line")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP parse server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8080, help="Port to bind to (default: 8080)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        from stockscan.cli.receipt import cmd_parse

        return _run_command(cmd_parse, args)
    if args.command == "serve":
        from stockscan.cli.receipt import cmd_serve

        return _run_command(cmd_serve, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
