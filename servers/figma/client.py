"""Figma REST API client.

Auth uses the ``X-Figma-Token`` header. The token is optional at startup:
without it every request goes out unauthenticated and Figma's own 403 is
reported back as the tool error.
"""

from __future__ import annotations

from typing import Any

import httpx

from shared.http_client import PlatformClient

PLATFORM = "Figma"


class FigmaClient:
    """Figma REST API v1 client."""

    def __init__(self, token: str = "", base_url: str = "https://api.figma.com/v1",
                 transport: httpx.AsyncBaseTransport | None = None):
        headers = {"X-Figma-Token": token} if token else {}
        self.http = PlatformClient(PLATFORM, base_url, headers=headers, transport=transport)

    async def get(self, path: str, **params) -> Any:
        return await self.http.get(path, params=params)

    async def post(self, path: str, payload: dict) -> Any:
        return await self.http.post(path, payload)

    async def aclose(self) -> None:
        await self.http.aclose()
