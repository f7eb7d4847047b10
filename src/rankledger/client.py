"""High-level async client for the ranking page."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import aiohttp
from bs4.builder import ParserRejectedMarkup

from rankledger._transport import PageTransport, Transport
from rankledger.config import RankLedgerConfig
from rankledger.exceptions import RankLedgerError, RankLedgerTransportError
from rankledger.ingestion.extract import extract_all
from rankledger.markup.node import Node, parse_html
from rankledger.models import Observation

_logger = logging.getLogger(__name__)


class RankLedgerClient:
    """Async client that fetches and parses the ranking page.

    Usage::

        async with RankLedgerClient(config) as client:
            observations = await client.scrape()
    """

    def __init__(
        self,
        config: RankLedgerConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RankLedgerClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = PageTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise RankLedgerError("Client not initialized. Use 'async with RankLedgerClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch_page(self, url: str | None = None) -> Node:
        """Fetch *url* (default: the configured page) and return its root node."""
        target = url or self._config.page_url
        body = await self._require_transport().get_body(target)
        try:
            return parse_html(body)
        except ParserRejectedMarkup as exc:
            raise RankLedgerTransportError(f"Could not parse markup from {target}: {exc}", url=target) from exc

    async def scrape(self, now: datetime | None = None, *, url: str | None = None) -> list[Observation]:
        """Fetch the page and extract one observation per ranking row.

        *now* defaults to the current time in the configured time zone.
        """
        page = await self.fetch_page(url)
        stamp = now if now is not None else datetime.now(self._config.zone)
        observations = extract_all(page, stamp, self._config.markers)
        _logger.info("Scraped %d ranked entries", len(observations))
        return observations
