from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from rankledger import cli
from rankledger.exceptions import RankLedgerTransportError, StructureChangedError
from rankledger.ledger import merge
from rankledger.models import Ledger, Observation, RetentionPolicy
from rankledger.pipeline import RunResult


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("RANKLEDGER_POLICY", "RANKLEDGER_LEDGER_PATH", "RANKLEDGER_PAGE_URL"):
        monkeypatch.delenv(key, raising=False)


def _install_run(monkeypatch: pytest.MonkeyPatch, outcome: Exception | None = None) -> list[Any]:
    seen: list[Any] = []

    async def fake_run_once(config: Any) -> RunResult:
        seen.append(config)
        if outcome is not None:
            raise outcome
        now = datetime(2026, 1, 1, tzinfo=UTC)
        observations = [Observation(name="Alpha", score=9.1, timestamp=now)]
        ledger = merge(Ledger.empty(config.policy), observations, config.policy)
        return RunResult(ledger=ledger, observations=observations, observed_at=now)

    monkeypatch.setattr(cli, "run_once", fake_run_once)
    return seen


def test_flags_override_configuration(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen = _install_run(monkeypatch)

    code = cli.main(["--policy", "snapshot", "--ledger", str(tmp_path / "l.json"), "--url", "https://example.test/"])

    assert code == cli.EXIT_OK
    (config,) = seen
    assert config.policy is RetentionPolicy.SNAPSHOT
    assert config.ledger_path == tmp_path / "l.json"
    assert config.page_url == "https://example.test/"


def test_no_flags_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _install_run(monkeypatch)

    assert cli.main([]) == cli.EXIT_OK
    assert seen[0].policy is RetentionPolicy.HISTORY


def test_chart_flag_writes_chart(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _install_run(monkeypatch)
    chart_path = tmp_path / "chart.json"

    assert cli.main(["--chart", str(chart_path)]) == cli.EXIT_OK
    assert json.loads(chart_path.read_text(encoding="utf-8"))["data_sets"][0]["name"] == "Alpha"


def test_layout_change_exits_with_page_changed(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    _install_run(monkeypatch, StructureChangedError("no ranking entries", marker="ranking-list"))

    assert cli.main([]) == cli.EXIT_PAGE_CHANGED
    assert "no ranking entries" in caplog.text


def test_transport_failure_exits_with_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_run(monkeypatch, RankLedgerTransportError("HTTP 503", status_code=503))

    assert cli.main([]) == cli.EXIT_FAILURE


def test_bad_policy_env_exits_with_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_run(monkeypatch)
    monkeypatch.setenv("RANKLEDGER_POLICY", "forever")

    assert cli.main([]) == cli.EXIT_FAILURE


def test_chart_failure_is_reported_after_save(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _install_run(monkeypatch)
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    assert cli.main(["--chart", str(blocker / "chart.json")]) == cli.EXIT_FAILURE
    assert "chart export failed" in caplog.text
    assert "ledger left unchanged" not in caplog.text
