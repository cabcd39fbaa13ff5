"""Shared constants and helpers for OCR receipt parsing."""

import re
from functools import lru_cache

# Dates like "12/03/2024", "1-2-24", "03:04:2024"
DATE_PATTERN = re.compile(r"^\d{1,2}[/\-:]\d{1,2}[/\-:]\d{2,4}")
DATE_ONLY_PATTERN = re.compile(r"^\d{1,2}[/\-:]\d{1,2}[/\-:]\d{2,4}$")

# Bare clock times like "14:05", "9:41:07 pm"
TIME_ONLY_PATTERN = re.compile(r"^\d{1,2}:\d{2}(?::\d{2})?\s*(?:[ap]\.?m\.?)?$", re.IGNORECASE)

ALPHA_RUN_PATTERN = re.compile(r"[^\W\d_]{2,}")
DIGITS_ONLY_PATTERN = re.compile(r"^\d+$")

# Separator rows such as "-----", "=== * ===", "#####"
SEPARATOR_CHARS = frozenset("*-=_#. \t")

WHITESPACE_RUN = re.compile(r"\s+")


def _collapse_whitespace(text: str) -> str:
    """Collapse internal whitespace runs to a single space and trim."""
    return WHITESPACE_RUN.sub(" ", text).strip()


@lru_cache(maxsize=16)
def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern[str] | None:
    """
    Build a case-insensitive matcher for a keyword set.

    A keyword matches when it is not embedded in a longer run of letters, so
    "SUBTOTAL:" and "TOTAL12.45" hit while "Cardamom" does not hit "card".
    Spaces inside a keyword match any whitespace run.
    """
    if not keywords:
        return None
    # Longest first so "sub total" wins over "total" in alternation order.
    ordered = sorted({kw.lower() for kw in keywords}, key=len, reverse=True)
    alternatives = [r"\s+".join(re.escape(part) for part in kw.split()) for kw in ordered]
    return re.compile(r"(?<![^\W\d_])(?:" + "|".join(alternatives) + r")(?![^\W\d_])", re.IGNORECASE)
