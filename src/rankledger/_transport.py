"""HTTP transport for fetching the ranking page."""

from __future__ import annotations

import logging
from typing import Protocol

import aiohttp

from rankledger.config import RankLedgerConfig
from rankledger.exceptions import RankLedgerTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the client.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`PageTransport`) concrete.
    """

    async def get_body(self, url: str) -> bytes:
        ...


class PageTransport:
    """Plain GET transport returning the raw response body.

    The body is not decoded here; the HTML parser sniffs the encoding
    from the bytes and any <meta charset> declaration.
    """

    def __init__(self, config: RankLedgerConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_body(self, url: str) -> bytes:
        """GET *url* and return its body bytes.

        The response is released on every exit path by the ``async with``
        block. Network errors, timeouts and non-200 statuses raise
        :class:`RankLedgerTransportError`.
        """
        headers = {
            "accept": "text/html,application/xhtml+xml",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                body = await resp.read()
                if resp.status != 200:
                    snippet = body[:200].decode("utf-8", errors="replace")
                    raise RankLedgerTransportError(
                        f"HTTP {resp.status} from {url}: {snippet}",
                        status_code=resp.status,
                        url=url,
                    )
        except RankLedgerTransportError:
            raise
        except TimeoutError as exc:
            raise RankLedgerTransportError(f"Request to {url} timed out", url=url) from exc
        except aiohttp.ClientError as exc:
            raise RankLedgerTransportError(f"Request to {url} failed: {exc}", url=url) from exc

        _logger.debug("Fetched %d bytes from %s", len(body), url)
        return body
