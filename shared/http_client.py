"""Thin httpx wrapper shared by the platform clients."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


class PlatformClient:
    """One authenticated ``httpx.AsyncClient`` per platform.

    Every call is a single request: no retries, no pagination following.
    Non-2xx responses raise ``httpx.HTTPStatusError``; callers leave the
    translation to the dispatcher.
    """

    def __init__(
        self,
        platform: str,
        base_url: str,
        headers: dict[str, str] | None = None,
        auth: httpx.Auth | tuple[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ):
        self.platform = platform
        self.base_url = base_url.rstrip("/") + "/"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers or {},
            auth=auth,
            transport=transport,
            timeout=timeout,
        )

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an API request and return the parsed body."""
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        resp = await self._client.request(
            method, path.lstrip("/"), params=params, json=json, headers=headers,
        )
        logger.debug(
            "platform_request",
            platform=self.platform,
            method=method,
            path=path,
            status=resp.status_code,
        )
        resp.raise_for_status()
        if resp.status_code == 204 or not resp.content:
            return {}
        content_type = resp.headers.get("content-type", "")
        if "json" in content_type:
            return resp.json()
        # Raw content (e.g. file bodies served as text/plain)
        return resp.text

    async def get(self, path: str, params: dict | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, params: dict | None = None) -> Any:
        return await self.request("POST", path, params=params, json=json if json is not None else {})

    async def put(self, path: str, json: Any = None, params: dict | None = None) -> Any:
        return await self.request("PUT", path, params=params, json=json if json is not None else {})

    async def patch(self, path: str, json: Any = None, params: dict | None = None) -> Any:
        return await self.request("PATCH", path, params=params, json=json if json is not None else {})

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()
