"""Azure DevOps tool implementations.

Each method is one catalogued tool. Multi-step tools (create_branch,
fork_repository, pushes) run their platform calls strictly in sequence and
stop at the first failure, so nothing is written after a failed read.
"""

from __future__ import annotations

import math

import structlog

from servers.azure_devops.client import ZERO_OBJECT_ID, AzureDevOpsClient, heads_ref
from shared.validation import clamp_int

logger = structlog.get_logger()


def _escape_wiql(value: str) -> str:
    return value.replace("'", "''")


class AzureDevOpsTools:
    """Tool implementations backed by an AzureDevOpsClient."""

    def __init__(self, client: AzureDevOpsClient):
        self.client = client

    # ---- Projects & repositories ----

    async def get_projects(self) -> list:
        return await self.client.list_projects()

    async def get_repositories(self, project_id: str) -> list:
        return await self.client.list_repositories(project_id)

    async def create_repository(self, project_id: str, name: str, description: str = "") -> dict:
        return await self.client.create_repository(project_id, name, description)

    async def search_repositories(
        self, project_id: str, query: str, page: int = 1, perPage: int = 30,
    ) -> dict:
        page = clamp_int(page, 1, 1, 10_000)
        per_page = clamp_int(perPage, 30, 1, 100)

        needle = query.lower()
        matches = [
            repo for repo in await self.client.list_repositories(project_id)
            if needle in (repo.get("name") or "").lower()
            or needle in (repo.get("description") or "").lower()
        ]
        start = (page - 1) * per_page
        return {
            "total_count": len(matches),
            "items": matches[start:start + per_page],
            "page": page,
            "perPage": per_page,
            "totalPages": math.ceil(len(matches) / per_page),
        }

    async def fork_repository(
        self, project_id: str, repository_id: str, name: str,
        target_project_id: str | None = None,
    ) -> dict:
        source = await self.client.get_repository(project_id, repository_id)
        target = target_project_id or project_id
        description = f"Fork of {source.get('name')}: {source.get('description') or ''}".rstrip()
        new_repo = await self.client.create_repository(target, name, description)
        await self.client.create_import_request(target, new_repo["id"], source.get("remoteUrl"))
        logger.info("repository_forked", source=source.get("name"), fork=name, project=target)
        return {**new_repo, "source": source}

    # ---- Branches & commits ----

    async def get_branches(self, project_id: str, repository_id: str) -> dict:
        return await self.client.list_branches(project_id, repository_id)

    async def create_branch(
        self, project_id: str, repository_id: str, branch: str,
        from_branch: str | None = None,
    ) -> dict:
        if not from_branch:
            default = await self.client.get_default_branch(project_id, repository_id)
            from_branch = default.removeprefix("refs/heads/")

        commit_id = await self.client.get_latest_commit(project_id, repository_id, from_branch)

        data = await self.client.update_refs(project_id, repository_id, [{
            "name": heads_ref(branch),
            "newObjectId": commit_id,
            "oldObjectId": ZERO_OBJECT_ID,
        }])
        return (data.get("value") or [{}])[0]

    async def update_branch(
        self, project_id: str, repository_id: str, branch: str,
        new_commit_id: str, old_commit_id: str,
    ) -> dict:
        return await self.client.update_refs(project_id, repository_id, [{
            "name": heads_ref(branch),
            "newObjectId": new_commit_id,
            "oldObjectId": old_commit_id,
        }])

    async def get_commits(self, project_id: str, repository_id: str, branch: str) -> dict:
        return await self.client.list_commits(project_id, repository_id, branch)

    # ---- Files ----

    async def get_file_content(self, project_id: str, repository_id: str, file_path: str, branch: str):
        return await self.client.get_item(project_id, repository_id, file_path, branch)

    async def update_file_content(
        self, project_id: str, repository_id: str, file_path: str,
        branch: str, content: str, commit_message: str,
    ) -> dict:
        return await self._push(
            project_id, repository_id, branch, commit_message,
            [{"path": file_path, "content": content}],
        )

    async def create_or_update_file(
        self, project_id: str, repository_id: str, path: str,
        content: str, commit_message: str, branch: str,
    ) -> dict:
        return await self._push(
            project_id, repository_id, branch, commit_message,
            [{"path": path, "content": content}],
        )

    async def push_files(
        self, project_id: str, repository_id: str, branch: str,
        files: list, commit_message: str,
    ) -> dict:
        return await self._push(project_id, repository_id, branch, commit_message, files)

    async def _push(
        self, project_id: str, repository_id: str, branch: str,
        commit_message: str, files: list,
    ) -> dict:
        old_object_id = await self.client.get_latest_commit(project_id, repository_id, branch)
        changes = [
            {
                "changeType": "edit",
                "item": {"path": f["path"]},
                "newContent": {"content": f["content"], "contentType": "rawtext"},
            }
            for f in files
        ]
        return await self.client.push(
            project_id, repository_id, branch, old_object_id, commit_message, changes,
        )

    # ---- Pull requests ----

    async def create_pull_request(
        self, project_id: str, repository_id: str, source_branch: str,
        target_branch: str, title: str, description: str = "",
    ) -> dict:
        return await self.client.create_pull_request(
            project_id, repository_id, source_branch, target_branch, title, description,
        )

    # ---- Work items ----

    async def get_issue(self, project_id: str, issue_id: str) -> dict:
        return await self.client.get_work_item(project_id, issue_id)

    async def add_issue_comment(
        self, project_id: str, repository_id: str, issue_id: str, comment: str,
    ) -> dict:
        # Work item comments are project-scoped; repository_id is accepted
        # for parity with the other repository tools.
        return await self.client.add_work_item_comment(project_id, issue_id, comment)

    # ---- Search ----

    async def search_code(
        self, project_id: str, repository_id: str, search_text: str,
        file_path: str | None = None, top: int = 100,
    ):
        return await self.client.search_items(
            project_id, repository_id, search_text, file_path=file_path, top=top,
        )

    async def search_work_items(
        self, project_id: str, query: str, state: str | None = None,
        type: str | None = None, assigned_to: str | None = None, top: int = 100,
    ) -> dict:
        clauses = [
            f"[System.TeamProject] = '{_escape_wiql(project_id)}'",
            f"[System.Title] CONTAINS '{_escape_wiql(query)}'",
        ]
        if state:
            clauses.append(f"[System.State] = '{_escape_wiql(state)}'")
        if type:
            clauses.append(f"[System.WorkItemType] = '{_escape_wiql(type)}'")
        if assigned_to:
            clauses.append(f"[System.AssignedTo] = '{_escape_wiql(assigned_to)}'")
        wiql = (
            "SELECT [System.Id], [System.Title], [System.State] FROM WorkItems WHERE "
            + " AND ".join(clauses)
            + " ORDER BY [System.ChangedDate] DESC"
        )

        data = await self.client.query_wiql(project_id, wiql, top=top)
        ids = [ref["id"] for ref in data.get("workItems") or []]
        if not ids:
            return {"count": 0, "value": []}

        items = await self.client.get_work_items(ids)
        value = items.get("value", [])
        return {"count": len(value), "value": value}

    async def search_users(self, query: str, top: int = 100) -> dict:
        data = await self.client.search_users(query, top=top)
        value = data.get("value", [])
        return {"count": len(value), "value": value}

    async def aclose(self) -> None:
        await self.client.aclose()
