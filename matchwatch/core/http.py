import asyncio
import json
import logging
from typing import Any, Optional

import httpx

from matchwatch.core.config import settings
from matchwatch.core.errors import FetchTimeoutError, HttpError, ParseError, TransportError

logger = logging.getLogger(__name__)

def default_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.USER_AGENT,
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.9",
    }

class RequestGateway:
    """
    Time-bounded JSON reads against the data service.

    The whole call (connect, send, read body) shares one budget. When it
    runs out the request task is cancelled, which closes the connection.
    No retries.
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.FETCH_TIMEOUT_SECONDS
        self._transport = transport

    async def _get(self, url: str, **options: Any) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout_seconds),
            headers=default_headers(),
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            return await client.get(url, **options)

    async def fetch_json(self, url: str, **options: Any) -> Any:
        try:
            async with asyncio.timeout(self.timeout_seconds):
                r = await self._get(url, **options)
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.warning("timeout after %ss: %s", self.timeout_seconds, url)
            raise FetchTimeoutError(url, self.timeout_seconds) from e
        except httpx.RequestError as e:
            # connection failures, redirect loops, undecodable bodies
            logger.warning("request failure for %s: %s", url, e)
            raise TransportError(str(e) or f"Request to {url} failed") from e

        if not r.is_success:
            text = r.text.strip() or None
            logger.warning("HTTP %s from %s", r.status_code, url)
            raise HttpError(r.status_code, text)

        try:
            return json.loads(r.content)
        except ValueError as e:
            raise ParseError() from e
