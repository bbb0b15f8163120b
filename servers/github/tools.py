"""GitHub tool implementations."""

from __future__ import annotations

import structlog

from servers.github.client import GitHubClient
from shared.validation import clamp_int

logger = structlog.get_logger()


def _paging(page, per_page) -> tuple[int, int]:
    return clamp_int(page, 1, 1, 10_000), clamp_int(per_page, 30, 1, 100)


class GitHubTools:
    """Tool implementations backed by a GitHubClient."""

    def __init__(self, client: GitHubClient):
        self.client = client

    # ---- Repositories ----

    async def search_repositories(self, query: str, page: int = 1, perPage: int = 30) -> dict:
        return await self.client.search_repositories(query, *_paging(page, perPage))

    async def get_repository(self, owner: str, repo: str) -> dict:
        return await self.client.get_repository(owner, repo)

    async def create_repository(
        self, name: str, description: str | None = None,
        private: bool | None = None, autoInit: bool | None = None,
    ) -> dict:
        payload: dict = {"name": name}
        if description:
            payload["description"] = description
        if private is not None:
            payload["private"] = private
        if autoInit is not None:
            payload["auto_init"] = autoInit
        return await self.client.create_repository(payload)

    async def fork_repository(self, owner: str, repo: str, organization: str | None = None) -> dict:
        return await self.client.fork_repository(owner, repo, organization)

    # ---- Files ----

    async def get_file_contents(self, owner: str, repo: str, path: str, branch: str | None = None):
        return await self.client.get_contents(owner, repo, path, ref=branch)

    async def create_or_update_file(
        self, owner: str, repo: str, path: str, content: str,
        message: str, branch: str, sha: str | None = None,
    ) -> dict:
        return await self.client.put_contents(owner, repo, path, content, message, branch, sha=sha)

    async def push_files(self, owner: str, repo: str, branch: str, files: list, message: str) -> dict:
        head_sha = await self.client.get_ref_sha(owner, repo, branch)
        tree = await self.client.create_tree(owner, repo, head_sha, files)
        commit = await self.client.create_commit(owner, repo, message, tree["sha"], [head_sha])
        result = await self.client.update_ref(owner, repo, branch, commit["sha"])
        logger.info("files_pushed", repo=f"{owner}/{repo}", branch=branch, files=len(files))
        return result

    # ---- Branches & commits ----

    async def create_branch(self, owner: str, repo: str, branch: str, from_branch: str | None = None) -> dict:
        if not from_branch:
            data = await self.client.get_repository(owner, repo)
            from_branch = data.get("default_branch") or "main"
        sha = await self.client.get_ref_sha(owner, repo, from_branch)
        return await self.client.create_ref(owner, repo, branch, sha)

    async def list_commits(
        self, owner: str, repo: str, sha: str | None = None, page: int = 1, perPage: int = 30,
    ) -> list:
        return await self.client.list_commits(owner, repo, sha, *_paging(page, perPage))

    # ---- Issues ----

    async def list_issues(
        self, owner: str, repo: str, state: str | None = None,
        labels: list | None = None, page: int = 1, perPage: int = 30,
    ) -> list:
        page, per_page = _paging(page, perPage)
        params = {
            "state": state,
            "labels": ",".join(labels) if labels else None,
            "page": page,
            "per_page": per_page,
        }
        return await self.client.list_issues(owner, repo, params)

    async def get_issue(self, owner: str, repo: str, issue_number: int) -> dict:
        return await self.client.get_issue(owner, repo, issue_number)

    async def create_issue(
        self, owner: str, repo: str, title: str, body: str | None = None,
        assignees: list | None = None, labels: list | None = None,
    ) -> dict:
        payload: dict = {"title": title}
        if body:
            payload["body"] = body
        if assignees:
            payload["assignees"] = assignees
        if labels:
            payload["labels"] = labels
        return await self.client.create_issue(owner, repo, payload)

    async def add_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> dict:
        return await self.client.add_issue_comment(owner, repo, issue_number, body)

    # ---- Pull requests ----

    async def create_pull_request(
        self, owner: str, repo: str, title: str, head: str, base: str,
        body: str | None = None, draft: bool | None = None,
    ) -> dict:
        payload: dict = {"title": title, "head": head, "base": base}
        if body:
            payload["body"] = body
        if draft is not None:
            payload["draft"] = draft
        return await self.client.create_pull_request(owner, repo, payload)

    # ---- Search ----

    async def search_code(self, q: str, page: int = 1, perPage: int = 30) -> dict:
        page, per_page = _paging(page, perPage)
        return await self.client.search("code", {"q": q, "page": page, "per_page": per_page})

    async def search_issues(
        self, q: str, sort: str | None = None, order: str | None = None,
        page: int = 1, perPage: int = 30,
    ) -> dict:
        page, per_page = _paging(page, perPage)
        return await self.client.search(
            "issues", {"q": q, "sort": sort, "order": order, "page": page, "per_page": per_page},
        )

    async def search_users(self, q: str, page: int = 1, perPage: int = 30) -> dict:
        page, per_page = _paging(page, perPage)
        return await self.client.search("users", {"q": q, "page": page, "per_page": per_page})

    async def aclose(self) -> None:
        await self.client.aclose()
