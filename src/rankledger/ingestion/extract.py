"""Ranking page field extraction.

Each ranking row is located by its entry marker, then the name and score
are read from inside that row. A missing landmark means the page layout
changed and is reported as :class:`StructureChangedError`.
"""

from __future__ import annotations

import logging
from datetime import datetime

from rankledger.config import ExtractorMarkers
from rankledger.exceptions import NodeNotFoundError, StructureChangedError
from rankledger.ingestion.normalize import first_text, parse_decimal
from rankledger.markup.node import Node
from rankledger.markup.search import search
from rankledger.models import Observation

_logger = logging.getLogger(__name__)

_DEFAULT_MARKERS = ExtractorMarkers()


def _require(root: Node, key: str, value: str, what: str) -> list[Node]:
    try:
        return search(root, key, value)
    except NodeNotFoundError as exc:
        raise StructureChangedError(
            f"Page layout changed: no {what} found for {key}={value!r}",
            marker=value,
        ) from exc


def list_entries(page: Node, markers: ExtractorMarkers = _DEFAULT_MARKERS) -> list[Node]:
    """Return the ranking-row blocks of *page* in document order."""
    return _require(page, markers.key, markers.entry, "ranking entries")


def extract_name(entry: Node, markers: ExtractorMarkers = _DEFAULT_MARKERS) -> str:
    """Return the entity name taken from the name anchor.

    Whitespace-only text children before the name are skipped and the
    result is stripped, so formatting around the anchor text does not
    change the name. Otherwise the text is used verbatim.
    """
    anchor = _require(entry, markers.key, markers.name, "name anchor")[0]
    name = first_text(anchor.texts)
    if name is None:
        raise StructureChangedError(
            f"Page layout changed: name anchor {markers.name!r} has no text",
            marker=markers.name,
        )
    return name


def extract_score(entry: Node, markers: ExtractorMarkers = _DEFAULT_MARKERS) -> float:
    """Return the entry's score parsed from the score marker's nested text."""
    cell = _require(entry, markers.key, markers.score, "score")[0]
    return parse_decimal(cell.text)


def extract_all(
    page: Node,
    now: datetime,
    markers: ExtractorMarkers = _DEFAULT_MARKERS,
) -> list[Observation]:
    """Extract one observation per ranking row.

    All observations share ``timestamp=now``: one page fetch is one
    logical instant.
    """
    observations = [
        Observation(name=extract_name(entry, markers), score=extract_score(entry, markers), timestamp=now)
        for entry in list_entries(page, markers)
    ]
    _logger.debug("Extracted %d observations at %s", len(observations), now.isoformat())
    return observations
