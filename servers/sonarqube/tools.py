"""SonarQube tool implementations.

List parameters (severities, metric keys...) are accepted as arrays and
sent as the comma-separated values the Web API expects.
"""

from __future__ import annotations

from servers.sonarqube.client import SonarQubeClient
from shared.validation import clamp_int


def _csv(values: list | None) -> str | None:
    return ",".join(values) if values else None


class SonarQubeTools:
    """Tool implementations backed by a SonarQubeClient."""

    def __init__(self, client: SonarQubeClient):
        self.client = client

    async def list_projects(self, query: str | None = None, page: int = 1, pageSize: int = 100) -> dict:
        return await self.client.get(
            "projects/search",
            q=query,
            p=clamp_int(page, 1, 1, 10_000),
            ps=clamp_int(pageSize, 100, 1, 500),
        )

    async def get_issues(
        self, project_key: str, severities: list | None = None, types: list | None = None,
        statuses: list | None = None, page: int = 1, pageSize: int = 100,
    ) -> dict:
        return await self.client.get(
            "issues/search",
            componentKeys=project_key,
            severities=_csv(severities),
            types=_csv(types),
            statuses=_csv(statuses),
            p=clamp_int(page, 1, 1, 10_000),
            ps=clamp_int(pageSize, 100, 1, 500),
        )

    async def get_measures(self, component: str, metric_keys: list) -> dict:
        return await self.client.get("measures/component", component=component, metricKeys=_csv(metric_keys))

    async def get_quality_gate_status(self, project_key: str, branch: str | None = None) -> dict:
        return await self.client.get("qualitygates/project_status", projectKey=project_key, branch=branch)

    async def get_hotspots(
        self, project_key: str, status: str | None = None, page: int = 1, pageSize: int = 100,
    ) -> dict:
        return await self.client.get(
            "hotspots/search",
            projectKey=project_key,
            status=status,
            p=clamp_int(page, 1, 1, 10_000),
            ps=clamp_int(pageSize, 100, 1, 500),
        )

    async def list_metrics(self, page: int = 1, pageSize: int = 100) -> dict:
        return await self.client.get(
            "metrics/search",
            p=clamp_int(page, 1, 1, 10_000),
            ps=clamp_int(pageSize, 100, 1, 500),
        )

    async def get_system_health(self) -> dict:
        return await self.client.get("system/health")

    async def get_source(self, key: str, from_line: int | None = None, to_line: int | None = None) -> dict:
        return await self.client.get("sources/lines", key=key, **{"from": from_line, "to": to_line})

    async def aclose(self) -> None:
        await self.client.aclose()
