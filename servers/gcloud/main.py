"""Google Cloud MCP server — wiring of settings, credentials, tools and dispatcher."""

from __future__ import annotations

import httpx

from servers.gcloud.client import GCloudClient, load_credentials
from servers.gcloud.manifest import MANIFEST
from servers.gcloud.tools import GCloudTools
from shared.config import Settings, get_settings
from shared.dispatch import ToolDispatcher

REQUIRED_SETTINGS = ("google_application_credentials", "google_cloud_project")
DEFAULT_TRANSPORT = "stdio"


def build_tools(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
    credentials=None,
) -> GCloudTools:
    """Build the tools; ``credentials`` defaults to the service-account key file."""
    if credentials is None:
        credentials = load_credentials(settings.google_application_credentials)
    client = GCloudClient(settings.google_cloud_project, credentials, transport=transport)
    return GCloudTools(client)


def create_dispatcher(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    credentials=None,
) -> ToolDispatcher:
    return ToolDispatcher(MANIFEST, build_tools(settings or get_settings(), transport, credentials))
