from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from agenda.services.exceptions import DownstreamServiceError

logger = logging.getLogger(__name__)


class RemoteApiClient:
    """Async HTTP client responsible for communicating with the agenda REST API."""

    def __init__(
        self,
        base_url: str | None,
        *,
        timeout: float = 10.0,
        use_mock_data: bool = True,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = str(base_url).rstrip("/") if base_url else None
        self._timeout = timeout
        self._transport = transport
        self.use_mock_data = use_mock_data or not self._base_url
        self._headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        self._client: Optional[httpx.AsyncClient] = None
        if not self.use_mock_data and self._base_url:
            self._client = self._build_client()

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=self._headers,
            transport=self._transport,
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self.use_mock_data or not self._base_url:
            raise RuntimeError("HTTP client requested while running in mock mode")
        if self._client is None:
            self._client = self._build_client()
        return self._client

    async def _send(
        self,
        method: str,
        path: str,
        *,
        payload: Dict[str, Any] | None = None,
    ) -> Any:
        client = await self._ensure_client()
        logger.debug("%s %s", method, path)
        try:
            response = await client.request(method, path, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DownstreamServiceError(
                "Agenda API returned an error response",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.RequestError as exc:
            raise DownstreamServiceError(
                "Unable to reach agenda API", status_code=None, cause=exc
            ) from exc
        if not response.content:
            return None
        return response.json()

    async def get(self, path: str) -> Any:
        return await self._send("GET", path)

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        return await self._send("POST", path, payload=payload)

    async def put(self, path: str, payload: Dict[str, Any]) -> Any:
        return await self._send("PUT", path, payload=payload)

    async def delete(self, path: str) -> Any:
        return await self._send("DELETE", path)

    async def simulate_latency(self) -> None:
        """Allow services to await for latency even when mocking responses."""

        await asyncio.sleep(0)
