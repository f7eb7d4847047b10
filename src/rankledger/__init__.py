"""rankledger - Scrape a ranking page into a per-entity score ledger."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rankledger")
except PackageNotFoundError:
    __version__ = "0+local"
from rankledger.client import RankLedgerClient
from rankledger.config import ExtractorMarkers, RankLedgerConfig
from rankledger.exceptions import (
    MalformedDataError,
    NodeNotFoundError,
    RankLedgerConfigError,
    RankLedgerError,
    RankLedgerPersistenceError,
    RankLedgerTransportError,
    StructureChangedError,
)
from rankledger.ledger import load_ledger, merge, save_ledger, sort_by_recency
from rankledger.markup import Node, parse_html, search
from rankledger.models import (
    EntitySeries,
    HistoryPoint,
    HistorySeries,
    Ledger,
    Observation,
    RetentionPolicy,
    SnapshotSeries,
)
from rankledger.pipeline import RunResult, run_once

__all__ = [
    "__version__",
    "EntitySeries",
    "ExtractorMarkers",
    "HistoryPoint",
    "HistorySeries",
    "Ledger",
    "MalformedDataError",
    "Node",
    "NodeNotFoundError",
    "Observation",
    "RankLedgerClient",
    "RankLedgerConfig",
    "RankLedgerConfigError",
    "RankLedgerError",
    "RankLedgerPersistenceError",
    "RankLedgerTransportError",
    "RetentionPolicy",
    "RunResult",
    "SnapshotSeries",
    "StructureChangedError",
    "load_ledger",
    "merge",
    "parse_html",
    "run_once",
    "save_ledger",
    "search",
    "sort_by_recency",
]
