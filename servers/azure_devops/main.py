"""Azure DevOps MCP server — wiring of settings, client, tools and dispatcher."""

from __future__ import annotations

import httpx

from servers.azure_devops.client import AzureDevOpsClient
from servers.azure_devops.manifest import MANIFEST
from servers.azure_devops.tools import AzureDevOpsTools
from shared.config import Settings, get_settings
from shared.dispatch import ToolDispatcher

REQUIRED_SETTINGS = ("azure_devops_org_url", "azure_devops_api_token")
DEFAULT_TRANSPORT = "stdio"


def build_tools(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> AzureDevOpsTools:
    client = AzureDevOpsClient(
        settings.azure_devops_org_url,
        settings.azure_devops_api_token,
        transport=transport,
    )
    return AzureDevOpsTools(client)


def create_dispatcher(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ToolDispatcher:
    return ToolDispatcher(MANIFEST, build_tools(settings or get_settings(), transport))
