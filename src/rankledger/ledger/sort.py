"""Recency ordering."""

from __future__ import annotations

from rankledger.models import EntitySeries, Ledger


def sort_by_recency(ledger: Ledger) -> list[EntitySeries]:
    """Order series by their last-inserted point, earliest first.

    The key is the last point written (timestamp for history, day for
    snapshot), not the largest one. ``sorted`` is stable, so ties keep
    ledger order.
    """
    return sorted(ledger.series, key=lambda entry: entry.last_seen)
