"""Client configuration for rankledger."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rankledger import _constants
from rankledger.exceptions import RankLedgerConfigError
from rankledger.models import RetentionPolicy


@dataclasses.dataclass(frozen=True)
class ExtractorMarkers:
    """Attribute landmarks that identify ranking rows and their fields.

    Each marker is matched against the full attribute value, so a ``class``
    marker must equal the element's literal class string.
    """

    key: str = _constants.MARKER_KEY
    entry: str = _constants.ENTRY_MARKER
    name: str = _constants.NAME_MARKER
    score: str = _constants.SCORE_MARKER


def parse_policy(value: str | RetentionPolicy) -> RetentionPolicy:
    """Resolve a retention policy name, raising a config error on junk."""
    if isinstance(value, RetentionPolicy):
        return value
    try:
        return RetentionPolicy(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in RetentionPolicy)
        raise RankLedgerConfigError(f"Unknown retention policy {value!r} (expected one of: {choices})") from exc


@dataclasses.dataclass(frozen=True)
class RankLedgerConfig:
    """Run configuration.

    Parameters
    ----------
    page_url : str
        Ranking page to scrape.
    ledger_path : Path
        JSON file holding the persisted ledger.
    policy : RetentionPolicy
        ``history`` keeps every observation, ``snapshot`` keeps one
        score per calendar day.
    time_zone : str
        IANA time zone used to stamp observations. Snapshot days are
        calendar days in this zone.
    request_timeout : float
        Total seconds allowed for the page fetch.
    user_agent : str
        ``User-Agent`` header sent with the page request.
    markers : ExtractorMarkers
        Attribute landmarks used by the field extractor.
    """

    page_url: str = _constants.PAGE_URL
    ledger_path: Path = Path(_constants.LEDGER_PATH)
    policy: RetentionPolicy = RetentionPolicy.HISTORY
    time_zone: str = "UTC"
    request_timeout: float = _constants.REQUEST_TIMEOUT_S
    user_agent: str = _constants.USER_AGENT
    markers: ExtractorMarkers = dataclasses.field(default_factory=ExtractorMarkers)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ledger_path", Path(self.ledger_path))
        object.__setattr__(self, "policy", parse_policy(self.policy))
        if self.request_timeout <= 0:
            raise RankLedgerConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        try:
            ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise RankLedgerConfigError(f"Unknown time zone {self.time_zone!r}") from exc

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)

    @classmethod
    def from_env(cls, **overrides: Any) -> RankLedgerConfig:
        """Create configuration from environment variables.

        Reads optional ``RANKLEDGER_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RankLedgerConfig
            Populated configuration.
        """
        env = os.environ

        marker_kwargs: dict[str, str] = {}
        _ENV_MARKER_MAP = {
            "RANKLEDGER_MARKER_KEY": "key",
            "RANKLEDGER_MARKER_ENTRY": "entry",
            "RANKLEDGER_MARKER_NAME": "name",
            "RANKLEDGER_MARKER_SCORE": "score",
        }
        for env_key, field_name in _ENV_MARKER_MAP.items():
            val = env.get(env_key)
            if val is not None:
                marker_kwargs[field_name] = val

        marker_overrides = overrides.pop("markers", None)
        if isinstance(marker_overrides, dict):
            marker_kwargs.update(marker_overrides)
        elif isinstance(marker_overrides, ExtractorMarkers):
            marker_kwargs = dataclasses.asdict(marker_overrides)

        config_kwargs: dict[str, Any] = {"markers": ExtractorMarkers(**marker_kwargs)}

        _ENV_CONFIG_MAP = {
            "RANKLEDGER_PAGE_URL": "page_url",
            "RANKLEDGER_LEDGER_PATH": "ledger_path",
            "RANKLEDGER_POLICY": "policy",
            "RANKLEDGER_TIME_ZONE": "time_zone",
            "RANKLEDGER_USER_AGENT": "user_agent",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # request_timeout is numeric, handle separately
        timeout_env = env.get("RANKLEDGER_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise RankLedgerConfigError(f"RANKLEDGER_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
