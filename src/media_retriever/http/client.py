"""Async HTTP transport used by platform handlers."""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Optional

import aiohttp

from ..errors import HttpStatusError, NetworkError


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class HttpResponse:
    """Decoded response of a GET request."""

    status: int
    data: Any
    headers: dict[str, str] = field(default_factory=dict)


class HttpClient:
    """Thin wrapper over aiohttp that decodes JSON and normalizes errors."""

    def __init__(self, timeout: float = 30, user_agent: Optional[str] = None):
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT

    async def get(self, url: str, headers: Optional[dict[str, str]] = None) -> HttpResponse:
        """
        Perform a GET request.

        Args:
            url: Address to fetch
            headers: Extra request headers

        Returns:
            HttpResponse with a JSON-decoded body when possible, raw text or bytes otherwise

        Raises:
            HttpStatusError: for non-2xx responses
            NetworkError: for connection failures and timeouts
        """
        request_headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=request_headers) as response:
                    body = await response.read()
                    if not 200 <= response.status < 300:
                        raise HttpStatusError(response.status, url)
                    return HttpResponse(
                        status=response.status,
                        data=self._decode(body),
                        headers=dict(response.headers),
                    )
        except asyncio.TimeoutError as e:
            raise NetworkError(f"Timeout after {self.timeout}s for {url}") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Network error for {url}: {e}") from e

    @staticmethod
    def _decode(body: bytes) -> Any:
        """JSON value if the body is UTF-8 JSON, text if only UTF-8, bytes otherwise."""
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            return body
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
