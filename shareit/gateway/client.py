"""
Backend client - forwards validated gateway calls to the ShareIt server.
Challenge: Relay the backend's status code and body unchanged.
Design: One pooled httpx.AsyncClient per gateway app; transport injectable for tests.
"""

import logging
from typing import Any

import httpx
from fastapi import Response

from shareit.config import get_settings

logger = logging.getLogger(__name__)


class ShareItClient:
    """Thin async HTTP client bound to the backend base URL."""

    def __init__(
        self,
        base_url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_id_header = get_settings().user_id_header
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @property
    def base_url(self) -> httpx.URL:
        return self._http.base_url

    async def aclose(self) -> None:
        await self._http.aclose()

    async def forward(
        self,
        method: str,
        path: str,
        user_id: int | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Response:
        """Send one request to the backend and wrap its answer as a FastAPI response."""
        headers = {}
        if user_id is not None:
            headers[self.user_id_header] = str(user_id)
        upstream = await self._http.request(method, path, headers=headers, params=params, json=json)
        logger.debug("%s %s -> %s", method, path, upstream.status_code)
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type=upstream.headers.get("content-type"),
        )

    async def get(self, path: str, user_id: int | None = None, params: dict[str, Any] | None = None) -> Response:
        return await self.forward("GET", path, user_id, params=params)

    async def post(self, path: str, user_id: int | None = None, json: Any = None) -> Response:
        return await self.forward("POST", path, user_id, json=json)

    async def patch(
        self, path: str, user_id: int | None = None, params: dict[str, Any] | None = None, json: Any = None
    ) -> Response:
        return await self.forward("PATCH", path, user_id, params=params, json=json)

    async def delete(self, path: str, user_id: int | None = None) -> Response:
        return await self.forward("DELETE", path, user_id)
