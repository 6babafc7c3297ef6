"""
Real HTTP transport.

Performs the GET / HEAD requests the content client needs over httpx.
Non-2xx responses surface as httpx.HTTPStatusError; timeouts and connection
errors surface as the matching httpx exceptions. Nothing is retried.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from wpcontent.integrations.contracts.interfaces import ContentTransport, TransportResponse


class HttpxTransport(ContentTransport):
    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: float = 20.0,
        user_agent: Optional[str] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._client = client
        self._owns_client = False

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout_seconds)
            self._owns_client = True
        return self._client

    async def get(self, url: str, *, json: bool = True) -> TransportResponse:
        response = await self._get_client().get(url, headers=self._headers())
        response.raise_for_status()
        if json:
            body = response.json() if response.content else None
        else:
            body = response.text
        return TransportResponse(
            status_code=response.status_code,
            headers=_lower_headers(response.headers),
            body=body,
        )

    async def head(self, url: str) -> TransportResponse:
        response = await self._get_client().head(url, headers=self._headers())
        response.raise_for_status()
        return TransportResponse(
            status_code=response.status_code,
            headers=_lower_headers(response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False


def _lower_headers(headers: httpx.Headers) -> Dict[str, str]:
    return {key.lower(): value for key, value in headers.items()}
