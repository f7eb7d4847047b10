"""Per-entity score series and the ledger that holds them.

Two retention policies share one shape: a series has a ``name`` and a
``points`` set, and knows how to record an :class:`Observation`.

* :class:`HistorySeries` appends every observation as a timestamped point.
* :class:`SnapshotSeries` keeps one score per calendar day; recording the
  same day again overwrites it and moves that day to the end, so the last
  key is always the last one written.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import ClassVar

from pydantic import Field, FiniteFloat, model_validator

from rankledger.models._base import EpochMillis, RankLedgerBaseModel
from rankledger.models.observation import Observation


class RetentionPolicy(StrEnum):
    HISTORY = "history"
    SNAPSHOT = "snapshot"


class HistoryPoint(RankLedgerBaseModel):
    date: EpochMillis
    score: FiniteFloat

    @classmethod
    def from_observation(cls, observation: Observation) -> HistoryPoint:
        return cls(date=observation.timestamp, score=observation.score)


class HistorySeries(RankLedgerBaseModel):
    """Append-only timestamped points; insertion order is chronological."""

    kind: ClassVar[RetentionPolicy] = RetentionPolicy.HISTORY

    name: str = Field(..., min_length=1)
    points: list[HistoryPoint] = Field(..., min_length=1)

    @classmethod
    def start(cls, observation: Observation) -> HistorySeries:
        return cls(name=observation.name, points=[HistoryPoint.from_observation(observation)])

    def record(self, observation: Observation) -> HistorySeries:
        points = [*self.points, HistoryPoint.from_observation(observation)]
        return self.model_copy(update={"points": points})

    @property
    def last_seen(self) -> datetime:
        return self.points[-1].date


class SnapshotSeries(RankLedgerBaseModel):
    """One score per calendar day, last write wins."""

    kind: ClassVar[RetentionPolicy] = RetentionPolicy.SNAPSHOT

    name: str = Field(..., min_length=1)
    points: dict[date, FiniteFloat] = Field(..., min_length=1)

    @classmethod
    def start(cls, observation: Observation) -> SnapshotSeries:
        return cls(name=observation.name, points={observation.timestamp.date(): observation.score})

    def record(self, observation: Observation) -> SnapshotSeries:
        day = observation.timestamp.date()
        points = {key: score for key, score in self.points.items() if key != day}
        points[day] = observation.score
        return self.model_copy(update={"points": points})

    @property
    def last_seen(self) -> date:
        return next(reversed(self.points))


EntitySeries = HistorySeries | SnapshotSeries

SERIES_TYPES: dict[RetentionPolicy, type[HistorySeries] | type[SnapshotSeries]] = {
    RetentionPolicy.HISTORY: HistorySeries,
    RetentionPolicy.SNAPSHOT: SnapshotSeries,
}


class Ledger(RankLedgerBaseModel):
    """Every entity ever observed, keyed by exact name.

    Series order carries no meaning until the ledger is sorted by
    recency before it is saved.
    """

    policy: RetentionPolicy = RetentionPolicy.HISTORY
    series: list[HistorySeries | SnapshotSeries] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_series(self) -> Ledger:
        seen: set[str] = set()
        for entry in self.series:
            if entry.kind != self.policy:
                raise ValueError(f"series {entry.name!r} is {entry.kind.value}, ledger policy is {self.policy.value}")
            if entry.name in seen:
                raise ValueError(f"duplicate series name {entry.name!r}")
            seen.add(entry.name)
        return self

    @classmethod
    def empty(cls, policy: RetentionPolicy = RetentionPolicy.HISTORY) -> Ledger:
        return cls(policy=policy)

    def __len__(self) -> int:
        return len(self.series)

    def get(self, name: str) -> EntitySeries | None:
        for entry in self.series:
            if entry.name == name:
                return entry
        return None

    def names(self) -> list[str]:
        return [entry.name for entry in self.series]

    def sorted_by_recency(self) -> Ledger:
        """Return a copy ordered earliest-last-seen first."""
        from rankledger.ledger.sort import sort_by_recency

        return self.model_copy(update={"series": sort_by_recency(self)})
