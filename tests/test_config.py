from __future__ import annotations

from pathlib import Path

import pytest

from rankledger.config import ExtractorMarkers, RankLedgerConfig
from rankledger.exceptions import RankLedgerConfigError
from rankledger.models import RetentionPolicy

_ENV_KEYS = (
    "RANKLEDGER_PAGE_URL",
    "RANKLEDGER_LEDGER_PATH",
    "RANKLEDGER_POLICY",
    "RANKLEDGER_TIME_ZONE",
    "RANKLEDGER_REQUEST_TIMEOUT",
    "RANKLEDGER_USER_AGENT",
    "RANKLEDGER_MARKER_KEY",
    "RANKLEDGER_MARKER_ENTRY",
    "RANKLEDGER_MARKER_NAME",
    "RANKLEDGER_MARKER_SCORE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_target_top_anime_history() -> None:
    config = RankLedgerConfig.from_env()

    assert config.page_url == "https://myanimelist.net/topanime.php"
    assert config.ledger_path == Path("data/scores.json")
    assert config.policy is RetentionPolicy.HISTORY
    assert config.markers == ExtractorMarkers()
    assert config.markers.score == "js-top-ranking-score-col di-ib al"


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANKLEDGER_PAGE_URL", "https://example.test/top")
    monkeypatch.setenv("RANKLEDGER_LEDGER_PATH", "/tmp/ledger.json")
    monkeypatch.setenv("RANKLEDGER_POLICY", "Snapshot")
    monkeypatch.setenv("RANKLEDGER_TIME_ZONE", "Asia/Tokyo")
    monkeypatch.setenv("RANKLEDGER_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("RANKLEDGER_MARKER_ENTRY", "row")

    config = RankLedgerConfig.from_env()

    assert config.page_url == "https://example.test/top"
    assert config.ledger_path == Path("/tmp/ledger.json")
    assert config.policy is RetentionPolicy.SNAPSHOT
    assert config.time_zone == "Asia/Tokyo"
    assert config.request_timeout == 5.0
    assert config.markers.entry == "row"
    assert config.markers.name == "hoverinfo_trigger"


def test_overrides_beat_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANKLEDGER_POLICY", "snapshot")
    monkeypatch.setenv("RANKLEDGER_REQUEST_TIMEOUT", "5")

    config = RankLedgerConfig.from_env(policy="history", request_timeout=9.5, markers={"key": "data-x"})

    assert config.policy is RetentionPolicy.HISTORY
    assert config.request_timeout == 9.5
    assert config.markers.key == "data-x"


def test_unknown_policy_rejected() -> None:
    with pytest.raises(RankLedgerConfigError, match="retention policy"):
        RankLedgerConfig(policy="forever")  # type: ignore[arg-type]


def test_unknown_time_zone_rejected() -> None:
    with pytest.raises(RankLedgerConfigError):
        RankLedgerConfig(time_zone="Mars/Olympus_Mons")


def test_non_numeric_timeout_env_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANKLEDGER_REQUEST_TIMEOUT", "soon")

    with pytest.raises(RankLedgerConfigError):
        RankLedgerConfig.from_env()


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(RankLedgerConfigError):
        RankLedgerConfig(request_timeout=0)
