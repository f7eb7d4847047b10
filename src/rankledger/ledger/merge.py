"""Deterministic ledger merge.

This is the only component allowed to fold observations into a ledger.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rankledger.ledger.policy import record_point, resolve_policy, start_series
from rankledger.models import EntitySeries, Ledger, Observation, RetentionPolicy

_logger = logging.getLogger(__name__)


def merge(
    ledger: Ledger,
    observations: Iterable[Observation],
    policy: RetentionPolicy | None = None,
) -> Ledger:
    """Return a new ledger with *observations* applied in order.

    Existing series get the policy's insertion rule; unseen names get a
    new series with exactly one point, appended after the existing ones.
    Several observations for one name in a batch are applied one after
    the other. *ledger* is left untouched.
    """
    active = resolve_policy(ledger.policy, policy, empty=len(ledger) == 0)

    series: list[EntitySeries] = list(ledger.series)
    index: dict[str, int] = {entry.name: position for position, entry in enumerate(series)}
    appended = 0
    created = 0

    for observation in observations:
        position = index.get(observation.name)
        if position is None:
            index[observation.name] = len(series)
            series.append(start_series(active, observation))
            created += 1
        else:
            series[position] = record_point(series[position], observation)
            appended += 1

    _logger.debug("Merged %d observations (%d new series, %d updates)", created + appended, created, appended)
    return Ledger(policy=active, series=series)
