"""Custom exception hierarchy for rankledger."""

from __future__ import annotations

from pathlib import Path


class RankLedgerError(Exception):
    """Base exception for all rankledger errors."""


class RankLedgerConfigError(RankLedgerError):
    """Invalid or missing configuration."""


class NodeNotFoundError(RankLedgerError):
    """No descendant carries the requested attribute.

    Callers decide whether this is fatal; the field extractor turns it
    into :class:`StructureChangedError`.
    """

    def __init__(self, message: str, *, key: str = "", value: str = "") -> None:
        self.key = key
        self.value = value
        super().__init__(message)


class StructureChangedError(RankLedgerError):
    """A required landmark is missing from the ranking page.

    The page layout no longer matches the configured markers. Retrying the
    same run will not help; the markers need updating.
    """

    def __init__(self, message: str, *, marker: str = "") -> None:
        self.marker = marker
        super().__init__(message)


class MalformedDataError(RankLedgerError):
    """A located value did not parse (e.g. non-numeric score text)."""

    def __init__(self, message: str, *, value: str = "") -> None:
        self.value = value
        super().__init__(message)


class RankLedgerTransportError(RankLedgerError):
    """HTTP-level failure (network, non-200, unparseable markup)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class RankLedgerPersistenceError(RankLedgerError):
    """The ledger file could not be read, decoded, validated or written."""

    def __init__(self, message: str, *, path: Path | str = "") -> None:
        self.path = str(path)
        super().__init__(message)
