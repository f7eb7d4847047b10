"""One scrape-merge-persist cycle.

The ledger is threaded through load, merge, sort and save as a value;
nothing is written unless every earlier step succeeded.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

import aiohttp

from rankledger.client import RankLedgerClient
from rankledger.config import RankLedgerConfig
from rankledger.ledger.merge import merge
from rankledger.ledger.store import load_ledger, save_ledger
from rankledger.models import Ledger, Observation

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of a completed run."""

    ledger: Ledger
    observations: list[Observation]
    observed_at: datetime


async def run_once(
    config: RankLedgerConfig,
    *,
    session: aiohttp.ClientSession | None = None,
    clock: Callable[[], datetime] | None = None,
) -> RunResult:
    """Load the ledger, scrape the page, merge, sort and save.

    Any :class:`~rankledger.exceptions.RankLedgerError` aborts the run
    before the ledger file is touched.
    """
    now = clock() if clock is not None else datetime.now(config.zone)
    ledger = load_ledger(config.ledger_path, config.policy)

    async with RankLedgerClient(config, session=session) as client:
        observations = await client.scrape(now)

    merged = merge(ledger, observations, config.policy).sorted_by_recency()
    save_ledger(config.ledger_path, merged)

    _logger.info(
        "Run at %s merged %d observations into %d series (%s policy)",
        now.isoformat(),
        len(observations),
        len(merged),
        config.policy.value,
    )
    return RunResult(ledger=merged, observations=observations, observed_at=now)
