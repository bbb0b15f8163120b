"""GitHub MCP server — wiring of settings, client, tools and dispatcher."""

from __future__ import annotations

import httpx

from servers.github.client import GitHubClient
from servers.github.manifest import MANIFEST
from servers.github.tools import GitHubTools
from shared.config import Settings, get_settings
from shared.dispatch import ToolDispatcher

REQUIRED_SETTINGS = ("github_personal_access_token",)
DEFAULT_TRANSPORT = "stdio"


def build_tools(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> GitHubTools:
    client = GitHubClient(
        settings.github_personal_access_token,
        base_url=settings.github_api_url,
        transport=transport,
    )
    return GitHubTools(client)


def create_dispatcher(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ToolDispatcher:
    return ToolDispatcher(MANIFEST, build_tools(settings or get_settings(), transport))
