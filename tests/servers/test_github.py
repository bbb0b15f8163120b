"""Tests for the GitHub server."""

from __future__ import annotations

import base64

import pytest

from shared.errors import InvalidParamsError
from tests.conftest import FakePlatform, make_dispatcher

REPO = "/repos/octo/app"


@pytest.fixture
def fake():
    return FakePlatform()


@pytest.fixture
def dispatcher(settings, fake):
    return make_dispatcher("github", settings, fake)


class TestRepositories:

    @pytest.mark.asyncio
    async def test_bearer_auth_and_api_headers(self, dispatcher, fake):
        fake.add("GET", REPO, {"full_name": "octo/app", "default_branch": "main"})

        result = await dispatcher.call("get_repository", {"owner": "octo", "repo": "app"})

        assert result.result["full_name"] == "octo/app"
        request = fake.requests[0]
        assert request.headers["authorization"] == "Bearer ghp_test"
        assert request.headers["accept"] == "application/vnd.github+json"
        assert request.headers["x-github-api-version"] == "2022-11-28"

    @pytest.mark.asyncio
    async def test_search_repositories_paging(self, dispatcher, fake):
        fake.add("GET", "/search/repositories", {"total_count": 0, "items": []})

        await dispatcher.call("search_repositories", {"query": "mcp language:python", "page": 3, "perPage": 500})

        params = fake.requests[0].url.params
        assert params["q"] == "mcp language:python"
        assert params["page"] == "3"
        assert params["per_page"] == "100"

    @pytest.mark.asyncio
    async def test_create_repository_maps_auto_init(self, dispatcher, fake):
        fake.add("POST", "/user/repos", {"name": "tools"})

        await dispatcher.call("create_repository", {"name": "tools", "private": True, "autoInit": True})

        assert fake.last_json("POST", "/user/repos") == {"name": "tools", "private": True, "auto_init": True}

    @pytest.mark.asyncio
    async def test_fork_to_organization(self, dispatcher, fake):
        fake.add("POST", f"{REPO}/forks", {"full_name": "acme/app"})

        await dispatcher.call("fork_repository", {"owner": "octo", "repo": "app", "organization": "acme"})

        assert fake.last_json("POST", f"{REPO}/forks") == {"organization": "acme"}


class TestFiles:

    @pytest.mark.asyncio
    async def test_create_or_update_file_encodes_content(self, dispatcher, fake):
        fake.add("PUT", f"{REPO}/contents/docs/intro.md", {"commit": {"sha": "c1"}})

        await dispatcher.call("create_or_update_file", {
            "owner": "octo", "repo": "app", "path": "docs/intro.md",
            "content": "héllo", "message": "docs", "branch": "main", "sha": "old",
        })

        body = fake.last_json("PUT", f"{REPO}/contents/docs/intro.md")
        assert base64.b64decode(body["content"]).decode("utf-8") == "héllo"
        assert body["sha"] == "old"
        assert body["branch"] == "main"

    @pytest.mark.asyncio
    async def test_get_file_contents_with_branch(self, dispatcher, fake):
        fake.add("GET", f"{REPO}/contents/README.md", {"type": "file", "content": "IyBhcHA="})

        await dispatcher.call("get_file_contents", {"owner": "octo", "repo": "app", "path": "README.md", "branch": "dev"})

        assert fake.requests[0].url.params["ref"] == "dev"

    @pytest.mark.asyncio
    async def test_push_files_chain(self, dispatcher, fake):
        fake.add("GET", f"{REPO}/git/ref/heads/main", {"object": {"sha": "head1"}})
        fake.add("POST", f"{REPO}/git/trees", {"sha": "tree1"})
        fake.add("POST", f"{REPO}/git/commits", {"sha": "commit1"})
        fake.add("PATCH", f"{REPO}/git/refs/heads/main", {"object": {"sha": "commit1"}})

        result = await dispatcher.call("push_files", {
            "owner": "octo", "repo": "app", "branch": "main", "message": "bulk",
            "files": [{"path": "a.py", "content": "a"}, {"path": "b.py", "content": "b"}],
        })

        assert result.success is True
        assert [r.method for r in fake.requests] == ["GET", "POST", "POST", "PATCH"]
        tree = fake.last_json("POST", f"{REPO}/git/trees")
        assert tree["base_tree"] == "head1"
        assert [t["path"] for t in tree["tree"]] == ["a.py", "b.py"]
        assert fake.last_json("POST", f"{REPO}/git/commits") == {"message": "bulk", "tree": "tree1", "parents": ["head1"]}
        assert fake.last_json("PATCH", f"{REPO}/git/refs/heads/main") == {"sha": "commit1", "force": False}

    @pytest.mark.asyncio
    async def test_push_files_stops_when_tree_fails(self, dispatcher, fake):
        fake.add("GET", f"{REPO}/git/ref/heads/main", {"object": {"sha": "head1"}})
        fake.add("POST", f"{REPO}/git/trees", {"message": "Invalid tree info"}, status=422)

        result = await dispatcher.call("push_files", {
            "owner": "octo", "repo": "app", "branch": "main", "message": "bulk",
            "files": [{"path": "a.py", "content": "a"}],
        })

        assert result.error == "GitHub API error: Invalid tree info"
        assert fake.calls("POST", f"{REPO}/git/commits") == []

    @pytest.mark.asyncio
    async def test_push_files_rejects_file_without_content(self, dispatcher, fake):
        with pytest.raises(InvalidParamsError) as exc_info:
            await dispatcher.call("push_files", {
                "owner": "octo", "repo": "app", "branch": "main", "message": "bulk",
                "files": [{"path": "a.py"}],
            })

        assert "files.0.content" in exc_info.value.message
        assert fake.call_count == 0


class TestBranches:

    @pytest.mark.asyncio
    async def test_create_branch_from_default(self, dispatcher, fake):
        fake.add("GET", REPO, {"default_branch": "trunk"})
        fake.add("GET", f"{REPO}/git/ref/heads/trunk", {"object": {"sha": "abc"}})
        fake.add("POST", f"{REPO}/git/refs", {"ref": "refs/heads/feature"})

        result = await dispatcher.call("create_branch", {"owner": "octo", "repo": "app", "branch": "feature"})

        assert result.result == {"ref": "refs/heads/feature"}
        assert fake.last_json("POST", f"{REPO}/git/refs") == {"ref": "refs/heads/feature", "sha": "abc"}

    @pytest.mark.asyncio
    async def test_create_branch_missing_source(self, dispatcher, fake):
        result = await dispatcher.call("create_branch", {
            "owner": "octo", "repo": "app", "branch": "feature", "from_branch": "ghost",
        })

        assert result.success is False
        assert result.error == "GitHub API error: not found"
        assert fake.calls("POST", f"{REPO}/git/refs") == []


class TestIssuesAndSearch:

    @pytest.mark.asyncio
    async def test_list_issues_joins_labels(self, dispatcher, fake):
        fake.add("GET", f"{REPO}/issues", [])

        await dispatcher.call("list_issues", {"owner": "octo", "repo": "app", "state": "closed", "labels": ["bug", "p1"]})

        params = fake.requests[0].url.params
        assert params["labels"] == "bug,p1"
        assert params["state"] == "closed"

    @pytest.mark.asyncio
    async def test_list_issues_rejects_unknown_state(self, dispatcher, fake):
        with pytest.raises(InvalidParamsError):
            await dispatcher.call("list_issues", {"owner": "octo", "repo": "app", "state": "merged"})
        assert fake.call_count == 0

    @pytest.mark.asyncio
    async def test_add_issue_comment(self, dispatcher, fake):
        fake.add("POST", f"{REPO}/issues/5/comments", {"id": 99})

        result = await dispatcher.call("add_issue_comment", {"owner": "octo", "repo": "app", "issue_number": "5", "body": "LGTM"})

        assert result.result == {"id": 99}
        assert fake.last_json("POST", f"{REPO}/issues/5/comments") == {"body": "LGTM"}

    @pytest.mark.asyncio
    async def test_create_pull_request_draft(self, dispatcher, fake):
        fake.add("POST", f"{REPO}/pulls", {"number": 10})

        await dispatcher.call("create_pull_request", {
            "owner": "octo", "repo": "app", "title": "WIP", "head": "feature", "base": "main", "draft": True,
        })

        assert fake.last_json("POST", f"{REPO}/pulls") == {"title": "WIP", "head": "feature", "base": "main", "draft": True}

    @pytest.mark.asyncio
    async def test_search_issues_omits_unset_sort(self, dispatcher, fake):
        fake.add("GET", "/search/issues", {"total_count": 0, "items": []})

        await dispatcher.call("search_issues", {"q": "repo:octo/app is:open"})

        params = fake.requests[0].url.params
        assert "sort" not in params
        assert params["per_page"] == "30"
