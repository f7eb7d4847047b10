"""JSON ledger persistence.

The file is a JSON array, one object per series, in ledger order::

    [{"name": "Alpha", "points": [{"date": 1760745600000, "score": 9.1}]}]

Snapshot ledgers store ``points`` as a ``{"YYYY-MM-DD": score}`` object.
The file does not record its policy; the caller supplies it on load.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from rankledger.exceptions import RankLedgerPersistenceError
from rankledger.models import SERIES_TYPES, Ledger, RetentionPolicy

_logger = logging.getLogger(__name__)

_ADAPTERS = {policy: TypeAdapter(list[series_type]) for policy, series_type in SERIES_TYPES.items()}


def load_ledger(path: Path | str, policy: RetentionPolicy) -> Ledger:
    """Read the ledger at *path*.

    A missing or blank file yields an empty ledger. Anything unreadable
    or not matching *policy* raises :class:`RankLedgerPersistenceError`.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except FileNotFoundError:
        _logger.info("No ledger at %s, starting empty", file_path)
        return Ledger.empty(policy)
    except OSError as exc:
        raise RankLedgerPersistenceError(f"Cannot read ledger {file_path}: {exc}", path=file_path) from exc

    if not raw.strip():
        _logger.warning("Ledger file %s is empty, starting empty", file_path)
        return Ledger.empty(policy)

    try:
        series = _ADAPTERS[policy].validate_json(raw)
        ledger = Ledger(policy=policy, series=series)
    except ValidationError as exc:
        raise RankLedgerPersistenceError(
            f"Ledger {file_path} is not a valid {policy.value} ledger: {exc}",
            path=file_path,
        ) from exc

    _logger.debug("Loaded %d series from %s", len(ledger), file_path)
    return ledger


def dump_ledger(ledger: Ledger) -> bytes:
    """Serialize *ledger* to indented JSON bytes."""
    return _ADAPTERS[ledger.policy].dump_json(ledger.series, indent=2)


def save_ledger(path: Path | str, ledger: Ledger) -> None:
    """Write *ledger* to *path*, replacing the old file atomically.

    The JSON is written to a sibling ``.tmp`` file first so a failed
    write never leaves a truncated ledger behind.
    """
    file_path = Path(path)
    tmp_path = file_path.with_name(f"{file_path.name}.tmp")
    payload = dump_ledger(ledger)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with tmp_path.open("wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, file_path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise RankLedgerPersistenceError(f"Cannot write ledger {file_path}: {exc}", path=file_path) from exc

    _logger.info("Saved %d series to %s", len(ledger), file_path)
