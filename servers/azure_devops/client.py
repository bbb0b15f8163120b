"""Azure DevOps REST client — request shaping for the Git, WIT and Graph APIs.

Auth is Basic with an empty username and the personal access token as
password. Every call pins ``api-version=7.1`` unless an endpoint needs a
preview version.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from shared.errors import PlatformError
from shared.http_client import PlatformClient

logger = structlog.get_logger()

PLATFORM = "Azure DevOps"
API_VERSION = "7.1"

# oldObjectId for a ref that does not exist yet
ZERO_OBJECT_ID = "0" * 40


def heads_ref(branch: str) -> str:
    return branch if branch.startswith("refs/heads/") else f"refs/heads/{branch}"


class AzureDevOpsClient:
    """Azure DevOps Services / Server REST API client."""

    def __init__(self, org_url: str, token: str, transport: httpx.AsyncBaseTransport | None = None):
        self.http = PlatformClient(
            PLATFORM,
            org_url,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            auth=("", token),
            transport=transport,
        )

    def error(self, detail: str) -> PlatformError:
        return PlatformError(PLATFORM, detail)

    async def _get(self, endpoint: str, api_version: str = API_VERSION, **params) -> Any:
        return await self.http.get(endpoint, params={**params, "api-version": api_version})

    async def _post(self, endpoint: str, json: Any, api_version: str = API_VERSION, **params) -> Any:
        return await self.http.post(endpoint, json=json, params={**params, "api-version": api_version})

    def _repo(self, project_id: str, repository_id: str) -> str:
        return f"{project_id}/_apis/git/repositories/{repository_id}"

    # ------------------------------------------------------------------
    # Projects & repositories
    # ------------------------------------------------------------------

    async def list_projects(self) -> list:
        data = await self._get("_apis/projects")
        return data.get("value", [])

    async def list_repositories(self, project_id: str) -> list:
        data = await self._get(f"{project_id}/_apis/git/repositories")
        return data.get("value", [])

    async def get_repository(self, project_id: str, repository_id: str) -> dict:
        return await self._get(self._repo(project_id, repository_id))

    async def create_repository(self, project_id: str, name: str, description: str = "") -> dict:
        return await self._post(
            "_apis/git/repositories",
            {
                "name": name,
                "project": {"id": project_id},
                "defaultBranch": "main",
                "description": description,
            },
        )

    async def create_import_request(self, project_id: str, repository_id: str, source_url: str) -> dict:
        return await self._post(
            f"{self._repo(project_id, repository_id)}/importRequests",
            {"parameters": {"gitSource": {"url": source_url}}},
        )

    # ------------------------------------------------------------------
    # Refs & commits
    # ------------------------------------------------------------------

    async def list_branches(self, project_id: str, repository_id: str) -> dict:
        return await self._get(f"{self._repo(project_id, repository_id)}/refs", filter="heads")

    async def get_default_branch(self, project_id: str, repository_id: str) -> str:
        repo = await self.get_repository(project_id, repository_id)
        default = repo.get("defaultBranch")
        if not default:
            raise self.error(f"Repository {repository_id} has no default branch")
        return default

    async def list_commits(self, project_id: str, repository_id: str, branch: str, top: int | None = None) -> dict:
        params: dict = {"searchCriteria.itemVersion.version": branch}
        if top is not None:
            params["searchCriteria.$top"] = top
        return await self._get(f"{self._repo(project_id, repository_id)}/commits", **params)

    async def get_latest_commit(self, project_id: str, repository_id: str, branch: str) -> str:
        data = await self.list_commits(project_id, repository_id, branch, top=1)
        commits = data.get("value") or []
        if not commits:
            raise self.error(f"No commits found for branch {branch}")
        return commits[0]["commitId"]

    async def update_refs(self, project_id: str, repository_id: str, ref_updates: list[dict]) -> dict:
        return await self._post(f"{self._repo(project_id, repository_id)}/refs", ref_updates)

    # ------------------------------------------------------------------
    # Items & pushes
    # ------------------------------------------------------------------

    async def get_item(self, project_id: str, repository_id: str, path: str, branch: str) -> Any:
        return await self._get(
            f"{self._repo(project_id, repository_id)}/items",
            path=path,
            **{"versionDescriptor.version": branch},
        )

    async def search_items(
        self, project_id: str, repository_id: str, search_text: str,
        file_path: str | None = None, top: int = 100,
    ) -> Any:
        params: dict = {"search": search_text, "$top": top}
        if file_path:
            params["scopePath"] = file_path
        return await self._get(f"{self._repo(project_id, repository_id)}/items", **params)

    async def push(
        self, project_id: str, repository_id: str, branch: str,
        old_object_id: str, commit_message: str, changes: list[dict],
    ) -> dict:
        return await self._post(
            f"{self._repo(project_id, repository_id)}/pushes",
            {
                "refUpdates": [{"name": heads_ref(branch), "oldObjectId": old_object_id}],
                "commits": [{"comment": commit_message, "changes": changes}],
            },
        )

    # ------------------------------------------------------------------
    # Pull requests
    # ------------------------------------------------------------------

    async def create_pull_request(
        self, project_id: str, repository_id: str, source_branch: str,
        target_branch: str, title: str, description: str = "",
    ) -> dict:
        return await self._post(
            f"{self._repo(project_id, repository_id)}/pullrequests",
            {
                "sourceRefName": heads_ref(source_branch),
                "targetRefName": heads_ref(target_branch),
                "title": title,
                "description": description,
            },
        )

    # ------------------------------------------------------------------
    # Work items
    # ------------------------------------------------------------------

    async def get_work_item(self, project_id: str, work_item_id: str) -> dict:
        return await self._get(f"{project_id}/_apis/wit/workitems/{work_item_id}")

    async def get_work_items(self, ids: list) -> dict:
        return await self._get("_apis/wit/workitems", ids=",".join(str(i) for i in ids))

    async def add_work_item_comment(self, project_id: str, work_item_id: str, text: str) -> dict:
        return await self._post(
            f"{project_id}/_apis/wit/workitems/{work_item_id}/comments",
            {"text": text},
            api_version="7.1-preview.4",
        )

    async def query_wiql(self, project_id: str, query: str, top: int = 100) -> dict:
        return await self._post(f"{project_id}/_apis/wit/wiql", {"query": query}, **{"$top": top})

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------

    async def search_users(self, query: str, top: int = 100) -> dict:
        return await self._get(
            "_apis/graph/users",
            api_version="7.1-preview.1",
            searchString=query,
            **{"$top": top},
        )

    async def aclose(self) -> None:
        await self.http.aclose()
