"""Typed ledger records.

Re-exports the observation and ledger models for convenient access::

    from rankledger.models import Ledger, Observation, RetentionPolicy
"""

from rankledger.models._base import EpochMillis, RankLedgerBaseModel
from rankledger.models.ledger import (
    SERIES_TYPES,
    EntitySeries,
    HistoryPoint,
    HistorySeries,
    Ledger,
    RetentionPolicy,
    SnapshotSeries,
)
from rankledger.models.observation import Observation

__all__ = [
    "SERIES_TYPES",
    "EntitySeries",
    "EpochMillis",
    "HistoryPoint",
    "HistorySeries",
    "Ledger",
    "Observation",
    "RankLedgerBaseModel",
    "RetentionPolicy",
    "SnapshotSeries",
]
