"""Figma MCP server — wiring of settings, client, tools and dispatcher."""

from __future__ import annotations

import httpx

from servers.figma.client import FigmaClient
from servers.figma.manifest import MANIFEST
from servers.figma.tools import FigmaTools
from shared.config import Settings, get_settings
from shared.dispatch import ToolDispatcher

# The token is optional; the CLI only warns when it is missing.
REQUIRED_SETTINGS: tuple[str, ...] = ()
DEFAULT_TRANSPORT = "http"


def build_tools(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> FigmaTools:
    client = FigmaClient(settings.figma_access_token, base_url=settings.figma_api_url, transport=transport)
    return FigmaTools(client)


def create_dispatcher(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ToolDispatcher:
    return ToolDispatcher(MANIFEST, build_tools(settings or get_settings(), transport))


def startup_warnings(settings: Settings) -> list[str]:
    if not settings.figma_access_token:
        return ["FIGMA_ACCESS_TOKEN not set; Figma will reject requests until a token is configured."]
    return []
