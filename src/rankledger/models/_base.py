"""Base model and shared field types for ledger records.

Every ledger model inherits from :class:`RankLedgerBaseModel` which is
frozen, so merging always produces new objects instead of editing the
ones the caller still holds.

History timestamps are persisted as integer epoch **milliseconds**; the
:data:`EpochMillis` annotated type converts in both directions.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer


def parse_epoch_ms(value: Any) -> Any:
    """Convert an epoch-milliseconds number to an aware UTC datetime.

    Naive datetimes are taken to be UTC. Anything else is passed through
    for pydantic's own datetime parsing.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(f"epoch milliseconds out of range: {value!r}") from exc
    return value


def to_epoch_ms(value: datetime) -> int:
    return round(value.timestamp() * 1000)


EpochMillis = Annotated[
    datetime,
    BeforeValidator(parse_epoch_ms),
    PlainSerializer(to_epoch_ms, return_type=int, when_used="json"),
]
"""Aware datetime stored as integer epoch milliseconds."""


class RankLedgerBaseModel(BaseModel):
    """Frozen base for ledger records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
