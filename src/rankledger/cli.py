"""Command-line entry point: run one scrape-merge-persist cycle."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from rankledger.chart import build_chart, write_chart
from rankledger.config import RankLedgerConfig
from rankledger.exceptions import (
    MalformedDataError,
    RankLedgerError,
    RankLedgerPersistenceError,
    StructureChangedError,
)
from rankledger.models import RetentionPolicy
from rankledger.pipeline import run_once

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_PAGE_CHANGED = 2


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rankledger",
        description="Scrape the ranking page and merge the scores into the ledger.",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in RetentionPolicy],
        default=None,
        help="Retention policy (default: RANKLEDGER_POLICY or history).",
    )
    parser.add_argument("--ledger", default=None, help="Ledger JSON file (default: RANKLEDGER_LEDGER_PATH).")
    parser.add_argument("--url", default=None, help="Ranking page URL (default: RANKLEDGER_PAGE_URL).")
    parser.add_argument("--chart", default=None, help="Also write chart data JSON to this file.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.policy is not None:
        overrides["policy"] = args.policy
    if args.ledger is not None:
        overrides["ledger_path"] = args.ledger
    if args.url is not None:
        overrides["page_url"] = args.url
    return overrides


async def _run(args: argparse.Namespace) -> int:
    config = RankLedgerConfig.from_env(**_overrides(args))
    result = await run_once(config)

    if args.chart:
        try:
            write_chart(args.chart, build_chart(result.ledger, datetime.now(config.zone)))
        except RankLedgerPersistenceError as exc:
            _logger.error("Ledger saved, but chart export failed: %s", exc)
            return EXIT_FAILURE
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        return asyncio.run(_run(args))
    except (StructureChangedError, MalformedDataError) as exc:
        _logger.error("Ranking page no longer matches the configured markers: %s", exc)
        return EXIT_PAGE_CHANGED
    except RankLedgerError as exc:
        _logger.error("Run aborted, ledger left unchanged: %s", exc)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
