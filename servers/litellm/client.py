"""LiteLLM proxy client (OpenAI-compatible API plus proxy management routes)."""

from __future__ import annotations

from typing import Any

import httpx

from shared.http_client import PlatformClient

PLATFORM = "LiteLLM"


class LiteLLMClient:
    """LiteLLM proxy client authenticated with the master key."""

    def __init__(self, base_url: str, master_key: str, transport: httpx.AsyncBaseTransport | None = None):
        self.http = PlatformClient(
            PLATFORM,
            base_url,
            headers={"Authorization": f"Bearer {master_key}"},
            transport=transport,
            # Completions can take well over the default 30s.
            timeout=120.0,
        )

    async def get(self, path: str, **params) -> Any:
        return await self.http.get(path, params=params)

    async def post(self, path: str, payload: dict) -> Any:
        return await self.http.post(path, payload)

    async def aclose(self) -> None:
        await self.http.aclose()
