"""Freshly scraped readings."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field, FiniteFloat, field_validator

from rankledger.models._base import RankLedgerBaseModel


class Observation(RankLedgerBaseModel):
    """One (name, score) reading taken from a ranking page at ``timestamp``.

    Observations are never persisted directly; they only reach disk once
    merged into a :class:`~rankledger.models.ledger.Ledger`.
    """

    name: str = Field(..., min_length=1, description="Entity name, matched exactly")
    score: FiniteFloat
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
