"""LiteLLM MCP server — wiring of settings, client, tools and dispatcher."""

from __future__ import annotations

import httpx

from servers.litellm.client import LiteLLMClient
from servers.litellm.manifest import MANIFEST
from servers.litellm.tools import LiteLLMTools
from shared.config import Settings, get_settings
from shared.dispatch import ToolDispatcher

REQUIRED_SETTINGS = ("litellm_master_key",)
DEFAULT_TRANSPORT = "stdio"


def build_tools(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> LiteLLMTools:
    client = LiteLLMClient(settings.litellm_url, settings.litellm_master_key, transport=transport)
    return LiteLLMTools(client)


def create_dispatcher(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ToolDispatcher:
    return ToolDispatcher(MANIFEST, build_tools(settings or get_settings(), transport))
