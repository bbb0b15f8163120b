"""GitHub REST API v3 client."""

from __future__ import annotations

import base64
from typing import Any

import httpx
import structlog

from shared.errors import PlatformError
from shared.http_client import PlatformClient

logger = structlog.get_logger()

PLATFORM = "GitHub"


class GitHubClient:
    """GitHub REST API client authenticated with a personal access token."""

    def __init__(self, token: str, base_url: str = "https://api.github.com",
                 transport: httpx.AsyncBaseTransport | None = None):
        self.http = PlatformClient(
            PLATFORM,
            base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            transport=transport,
        )

    def error(self, detail: str) -> PlatformError:
        return PlatformError(PLATFORM, detail)

    def _repo(self, owner: str, repo: str) -> str:
        return f"repos/{owner}/{repo}"

    # ------------------------------------------------------------------
    # Repositories
    # ------------------------------------------------------------------

    async def search_repositories(self, query: str, page: int, per_page: int) -> dict:
        return await self.http.get("search/repositories", {"q": query, "page": page, "per_page": per_page})

    async def get_repository(self, owner: str, repo: str) -> dict:
        return await self.http.get(self._repo(owner, repo))

    async def create_repository(self, payload: dict) -> dict:
        return await self.http.post("user/repos", payload)

    async def fork_repository(self, owner: str, repo: str, organization: str | None = None) -> dict:
        payload = {"organization": organization} if organization else {}
        return await self.http.post(f"{self._repo(owner, repo)}/forks", payload)

    # ------------------------------------------------------------------
    # Contents & git data
    # ------------------------------------------------------------------

    async def get_contents(self, owner: str, repo: str, path: str, ref: str | None = None) -> Any:
        return await self.http.get(f"{self._repo(owner, repo)}/contents/{path}", {"ref": ref})

    async def put_contents(
        self, owner: str, repo: str, path: str, content: str,
        message: str, branch: str, sha: str | None = None,
    ) -> dict:
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": branch,
        }
        if sha:
            payload["sha"] = sha
        return await self.http.put(f"{self._repo(owner, repo)}/contents/{path}", payload)

    async def get_ref_sha(self, owner: str, repo: str, branch: str) -> str:
        data = await self.http.get(f"{self._repo(owner, repo)}/git/ref/heads/{branch}")
        sha = (data.get("object") or {}).get("sha")
        if not sha:
            raise self.error(f"Branch {branch} not found")
        return sha

    async def create_ref(self, owner: str, repo: str, branch: str, sha: str) -> dict:
        return await self.http.post(
            f"{self._repo(owner, repo)}/git/refs",
            {"ref": f"refs/heads/{branch}", "sha": sha},
        )

    async def update_ref(self, owner: str, repo: str, branch: str, sha: str) -> dict:
        return await self.http.patch(
            f"{self._repo(owner, repo)}/git/refs/heads/{branch}",
            {"sha": sha, "force": False},
        )

    async def create_tree(self, owner: str, repo: str, base_tree: str, files: list[dict]) -> dict:
        tree = [
            {"path": f["path"], "mode": "100644", "type": "blob", "content": f["content"]}
            for f in files
        ]
        return await self.http.post(
            f"{self._repo(owner, repo)}/git/trees",
            {"base_tree": base_tree, "tree": tree},
        )

    async def create_commit(self, owner: str, repo: str, message: str, tree: str, parents: list[str]) -> dict:
        return await self.http.post(
            f"{self._repo(owner, repo)}/git/commits",
            {"message": message, "tree": tree, "parents": parents},
        )

    async def list_commits(self, owner: str, repo: str, sha: str | None, page: int, per_page: int) -> list:
        return await self.http.get(
            f"{self._repo(owner, repo)}/commits",
            {"sha": sha, "page": page, "per_page": per_page},
        )

    # ------------------------------------------------------------------
    # Issues & pull requests
    # ------------------------------------------------------------------

    async def list_issues(self, owner: str, repo: str, params: dict) -> list:
        return await self.http.get(f"{self._repo(owner, repo)}/issues", params)

    async def get_issue(self, owner: str, repo: str, issue_number: int) -> dict:
        return await self.http.get(f"{self._repo(owner, repo)}/issues/{issue_number}")

    async def create_issue(self, owner: str, repo: str, payload: dict) -> dict:
        return await self.http.post(f"{self._repo(owner, repo)}/issues", payload)

    async def add_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> dict:
        return await self.http.post(
            f"{self._repo(owner, repo)}/issues/{issue_number}/comments", {"body": body},
        )

    async def create_pull_request(self, owner: str, repo: str, payload: dict) -> dict:
        return await self.http.post(f"{self._repo(owner, repo)}/pulls", payload)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, kind: str, params: dict) -> dict:
        return await self.http.get(f"search/{kind}", params)

    async def aclose(self) -> None:
        await self.http.aclose()
