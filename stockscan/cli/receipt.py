"""Receipt command handlers used by the CLI."""

import argparse
import json
import logging
import sys
from pathlib import Path

from stockscan.receipt import NO_ITEMS_HINT, parse_receipt_items
from stockscan.receipt.formatter import format_items_table, items_to_dicts
from stockscan.runtime import get_logger, load_parser_config, set_log_level

logger = get_logger(__name__)


def _read_input(source: str | None) -> str:
    """Read OCR text from a file path, or stdin for None/"-"."""
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse OCR receipt text and print the proposed items."""
    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        config = load_parser_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        print(f"Error: {e}")
        sys.exit(1)

    try:
        text = _read_input(args.file)
    except FileNotFoundError:
        logger.error("Input file not found: %s", args.file)
        print(f"Error: input file not found: {args.file}")
        sys.exit(1)
    except OSError as e:
        logger.error("Cannot read input %s: %s", args.file, e)
        print(f"Error: cannot read input file {args.file}: {e.strerror or e}")
        sys.exit(1)

    items = parse_receipt_items(text, config)

    if args.format == "json":
        payload = {
            "items": items_to_dicts(items),
            "count": len(items),
            "message": None if items else NO_ITEMS_HINT,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if not items:
        print(NO_ITEMS_HINT)
        return

    print("=" * 60)
    print("PROPOSED ITEMS (review before saving)")
    print("=" * 60)
    print(format_items_table(items))


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI server for parsing receipt text."""
    import uvicorn

    from stockscan.runtime import receipt_server as server

    print(f"Starting receipt parser on {args.host}:{args.port}")
    print(f"Parse endpoint: http://{args.host}:{args.port}/parse")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=args.host, port=args.port)
