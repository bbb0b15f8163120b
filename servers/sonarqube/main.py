"""SonarQube MCP server — wiring of settings, client, tools and dispatcher."""

from __future__ import annotations

import httpx

from servers.sonarqube.client import SonarQubeClient
from servers.sonarqube.manifest import MANIFEST
from servers.sonarqube.tools import SonarQubeTools
from shared.config import DEFAULT_SONAR_URL, Settings, get_settings
from shared.dispatch import ToolDispatcher

REQUIRED_SETTINGS = ("sonar_token",)
DEFAULT_TRANSPORT = "stdio"


def build_tools(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> SonarQubeTools:
    client = SonarQubeClient(settings.sonar_url or DEFAULT_SONAR_URL, settings.sonar_token, transport=transport)
    return SonarQubeTools(client)


def create_dispatcher(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ToolDispatcher:
    return ToolDispatcher(MANIFEST, build_tools(settings or get_settings(), transport))


def startup_warnings(settings: Settings) -> list[str]:
    if not settings.sonar_url:
        return [f"SONAR_URL not set. Using default: {DEFAULT_SONAR_URL}"]
    return []
