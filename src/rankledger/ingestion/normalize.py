"""Normalization helpers.

Centralizes strict parsing of text pulled out of the page.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from rankledger.exceptions import MalformedDataError


def parse_decimal(text: str) -> float:
    """Parse *text* as a finite decimal number.

    Surrounding whitespace is ignored. ``NaN``/``inf`` and anything
    ``float`` rejects raise :class:`MalformedDataError`.
    """
    stripped = text.strip()
    try:
        result = float(stripped)
    except ValueError as exc:
        raise MalformedDataError(f"Not a decimal number: {stripped!r}", value=stripped) from exc
    if not math.isfinite(result):
        raise MalformedDataError(f"Not a finite number: {stripped!r}", value=stripped)
    return result


def first_text(texts: Sequence[str]) -> str | None:
    """Return the first non-blank text, stripped, or ``None``."""
    for text in texts:
        stripped = text.strip()
        if stripped:
            return stripped
    return None
