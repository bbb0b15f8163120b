"""SonarQube Web API client (Bearer token auth)."""

from __future__ import annotations

from typing import Any

import httpx

from shared.http_client import PlatformClient

PLATFORM = "SonarQube"


class SonarQubeClient:
    """SonarQube Web API client. All endpoints live under ``api/``."""

    def __init__(self, base_url: str, token: str, transport: httpx.AsyncBaseTransport | None = None):
        self.http = PlatformClient(
            PLATFORM,
            base_url,
            headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
            transport=transport,
        )

    async def get(self, endpoint: str, **params) -> Any:
        return await self.http.get(f"api/{endpoint}", params=params)

    async def aclose(self) -> None:
        await self.http.aclose()
