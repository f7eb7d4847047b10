"""Retention policy point-insertion rules.

This module contains no lookup or ordering logic; it only decides how a
single observation lands in a single series.
"""

from __future__ import annotations

from rankledger.models import SERIES_TYPES, EntitySeries, Observation, RetentionPolicy


def start_series(policy: RetentionPolicy, observation: Observation) -> EntitySeries:
    """Create a series holding exactly *observation*."""
    return SERIES_TYPES[policy].start(observation)


def record_point(series: EntitySeries, observation: Observation) -> EntitySeries:
    """Apply the series' insertion rule.

    History appends a timestamped point even if the score is unchanged.
    Snapshot upserts the observation's calendar day, last write wins.
    """
    return series.record(observation)


def resolve_policy(ledger_policy: RetentionPolicy, requested: RetentionPolicy | None, *, empty: bool) -> RetentionPolicy:
    """Pick the policy for a merge pass.

    An empty ledger adopts whatever policy is requested. A populated one
    must be merged under the policy it was built with.
    """
    if requested is None:
        return ledger_policy
    if not empty and requested != ledger_policy:
        raise ValueError(f"Cannot merge under {requested.value} policy into a {ledger_policy.value} ledger")
    return requested
