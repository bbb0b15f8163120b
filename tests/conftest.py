"""Shared test fixtures for the MCP server test suite.

Platform HTTP is faked with ``httpx.MockTransport`` so every server can be
exercised end to end (dispatcher → tools → client → wire) without network
access. ``FakePlatform`` records every request it sees, which lets tests
assert that validation failures never reach the platform.
"""

from __future__ import annotations

import importlib
import json

import httpx
import pytest

from shared.config import Settings


# ---------------------------------------------------------------------------
# Fake platform
# ---------------------------------------------------------------------------


class FakePlatform:
    """Canned responses keyed by (method, URL path), plus a request log.

    Unrouted requests get a 404 ``{"message": "not found"}``.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, json_body=None, status: int = 200, text: str | None = None):
        """Register a response. ``json_body`` may be a callable taking the request."""
        self.routes[(method.upper(), path)] = (status, json_body, text)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        status, body, text = route
        if text is not None:
            return httpx.Response(status, text=text, headers={"content-type": "text/plain"})
        if callable(body):
            body = body(request)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def last_json(self, method: str, path: str):
        return json.loads(self.calls(method, path)[-1].content)


class FakeCredentials:
    """Stand-in for google-auth credentials that never need refreshing."""

    valid = True
    token = "ya29.test-token"

    def refresh(self, request):
        raise AssertionError("refresh should not be called for valid credentials")


@pytest.fixture
def fake_platform():
    return FakePlatform()


@pytest.fixture
def settings():
    """Settings with every platform configured, independent of the environment."""
    return Settings(
        _env_file=None,
        azure_devops_org_url="https://dev.azure.com/acme",
        azure_devops_api_token="ado-pat",
        github_personal_access_token="ghp_test",
        github_api_url="https://api.github.com",
        figma_access_token="figd_test",
        figma_api_url="https://api.figma.com/v1",
        sonar_token="squ_test",
        sonar_url="https://sonar.example.com",
        google_application_credentials="/tmp/sa.json",
        google_cloud_project="acme-prod",
        litellm_master_key="sk-master",
        litellm_url="http://litellm.local:4000",
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_dispatcher(platform: str, settings: Settings, fake: FakePlatform):
    """Build a platform's dispatcher wired to a FakePlatform."""
    main = importlib.import_module(f"servers.{platform}.main")
    if platform == "gcloud":
        return main.create_dispatcher(settings, fake.transport, credentials=FakeCredentials())
    return main.create_dispatcher(settings, fake.transport)


def sample_value(param):
    """A plausible value for a manifest parameter, used to fill required args."""
    if param.enum:
        return param.enum[0]
    return {
        "string": "x",
        "integer": 1,
        "number": 1.0,
        "boolean": True,
        "array": [{"path": "a.txt", "content": "a", "role": "user"}] if param.items and param.items.get("type") == "object" else ["x"],
        "object": {"k": "v"},
    }[param.type]
