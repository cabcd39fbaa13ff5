"""FastAPI server that turns OCR receipt text into proposed items."""

import json
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from stockscan.receipt import NO_ITEMS_HINT, parse_receipt_items
from stockscan.receipt.formatter import items_to_dicts
from stockscan.runtime.logging import get_logger
from stockscan.runtime.parser_rules import load_parser_config

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load parser rules once on startup so requests hit the cache."""
    try:
        await run_in_threadpool(load_parser_config)
    except ValueError as e:
        logger.error("Parser rules are invalid; /parse will fail until fixed: %s", e)
    yield


app = FastAPI(title="Receipt Item Parser", lifespan=lifespan)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=status_code)


async def _read_receipt_text(request: Request) -> str | None:
    """Return OCR text from a JSON ``{"text": ...}`` or a text/plain body."""
    content_type = request.headers.get("content-type", "")
    body = await request.body()

    if content_type.startswith("text/plain"):
        return body.decode("utf-8", errors="replace")

    try:
        payload = json.loads(body or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.info("Rejected request with unreadable JSON body")
        return None
    if not isinstance(payload, dict):
        return None
    text = payload.get("text")
    return text if isinstance(text, str) else None


@app.post("/parse")
async def parse_receipt_text(request: Request) -> JSONResponse:
    """Parse OCR text and propose items for the review screen."""
    text = await _read_receipt_text(request)
    if text is None:
        return _error('Expected JSON body {"text": "..."} or text/plain', 400)

    try:
        config = await run_in_threadpool(load_parser_config)
    except ValueError as e:
        logger.error("%s", e)
        return _error(str(e), 500)

    items = parse_receipt_items(text, config)
    logger.debug("Parsed %d items from %d characters", len(items), len(text))

    return JSONResponse(
        {
            "status": "success",
            "items": items_to_dicts(items),
            "count": len(items),
            "message": None if items else NO_ITEMS_HINT,
        }
    )


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
