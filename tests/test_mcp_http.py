"""Tests for the HTTP transport — JSON-RPC over POST /mcp plus the REST routes."""

from __future__ import annotations

import httpx
import pytest

from shared.errors import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND, PARSE_ERROR
from shared.mcp_http import PROTOCOL_VERSION, create_app
from tests.conftest import FakePlatform, make_dispatcher


@pytest.fixture
def fake():
    fake = FakePlatform()
    fake.add("GET", "/acme/_apis/projects", {"count": 1, "value": [{"id": "p1", "name": "Apollo"}]})
    fake.add("GET", "/acme/P/_apis/git/repositories", {"message": "TF200016: The project does not exist"}, status=404)
    return fake


@pytest.fixture
def client(settings, fake):
    app = create_app(make_dispatcher("azure_devops", settings, fake))
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


async def _rpc(client, method, params=None, request_id=1):
    body = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        body["params"] = params
    resp = await client.post("/mcp", json=body)
    assert resp.status_code == 200
    return resp.json()


class TestJsonRpc:

    @pytest.mark.asyncio
    async def test_initialize(self, client):
        data = await _rpc(client, "initialize", {"protocolVersion": PROTOCOL_VERSION, "clientInfo": {"name": "pytest"}})
        assert data["id"] == 1
        assert data["result"]["serverInfo"]["name"] == "azure-devops-mcp-server"
        assert data["result"]["capabilities"] == {"tools": {}}

    @pytest.mark.asyncio
    async def test_initialized_notification_has_no_body(self, client):
        resp = await client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert resp.status_code == 202
        assert resp.content == b""

    @pytest.mark.asyncio
    async def test_tools_list(self, client):
        data = await _rpc(client, "tools/list")
        tools = {t["name"]: t for t in data["result"]["tools"]}
        assert len(tools) == 19
        schema = tools["create_branch"]["inputSchema"]
        assert schema["required"] == ["project_id", "repository_id", "branch"]
        assert "from_branch" in schema["properties"]

    @pytest.mark.asyncio
    async def test_tools_call_success(self, client):
        data = await _rpc(client, "tools/call", {"name": "get_projects", "arguments": {}})
        result = data["result"]
        assert result["isError"] is False
        assert "Apollo" in result["content"][0]["text"]

    @pytest.mark.asyncio
    async def test_tools_call_platform_error_is_a_result(self, client):
        data = await _rpc(client, "tools/call", {"name": "get_repositories", "arguments": {"project_id": "P"}})
        result = data["result"]
        assert result["isError"] is True
        assert result["content"][0]["text"] == "Azure DevOps API error: TF200016: The project does not exist"

    @pytest.mark.asyncio
    async def test_unknown_tool(self, client, fake):
        data = await _rpc(client, "tools/call", {"name": "delete_everything", "arguments": {}})
        assert data["error"]["code"] == METHOD_NOT_FOUND
        assert data["error"]["message"] == "Unknown tool: delete_everything"
        assert fake.call_count == 0

    @pytest.mark.asyncio
    async def test_missing_arguments(self, client, fake):
        data = await _rpc(client, "tools/call", {"name": "get_repositories", "arguments": {}})
        assert data["error"]["code"] == INVALID_PARAMS
        assert "project_id" in data["error"]["message"]
        assert fake.call_count == 0

    @pytest.mark.asyncio
    async def test_unknown_method(self, client):
        data = await _rpc(client, "resources/list")
        assert data["error"]["code"] == METHOD_NOT_FOUND

    @pytest.mark.asyncio
    async def test_ping(self, client):
        data = await _rpc(client, "ping", request_id="abc")
        assert data == {"jsonrpc": "2.0", "id": "abc", "result": {}}

    @pytest.mark.asyncio
    async def test_parse_error(self, client):
        resp = await client.post("/mcp", content=b"{not json", headers={"content-type": "application/json"})
        assert resp.json()["error"]["code"] == PARSE_ERROR

    @pytest.mark.asyncio
    async def test_invalid_request(self, client):
        resp = await client.post("/mcp", json={"id": 1, "method": "ping"})
        assert resp.json()["error"]["code"] == INVALID_REQUEST

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [["get_projects"], "get_projects", 7])
    async def test_non_object_params(self, client, fake, params):
        data = await _rpc(client, "tools/call", params)
        assert data["error"]["code"] == INVALID_PARAMS
        assert fake.call_count == 0

    @pytest.mark.asyncio
    async def test_non_object_arguments(self, client, fake):
        data = await _rpc(client, "tools/call", {"name": "get_repositories", "arguments": ["P"]})
        assert data["error"]["code"] == INVALID_PARAMS
        assert fake.call_count == 0

    @pytest.mark.asyncio
    async def test_fatal_handler_error_is_internal_error(self, client, fake):
        # A 200 with a non-list body breaks get_projects' assumptions.
        fake.add("GET", "/acme/_apis/projects", ["unexpected"])
        data = await _rpc(client, "tools/call", {"name": "get_projects", "arguments": {}})
        assert data["error"]["code"] == INTERNAL_ERROR

        # The server keeps serving afterwards.
        data = await _rpc(client, "ping", request_id=2)
        assert data["result"] == {}


class TestRestRoutes:

    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.json() == {"status": "ok", "server": "azure-devops-mcp-server", "tools": 19}

    @pytest.mark.asyncio
    async def test_manifest(self, client):
        resp = await client.get("/manifest")
        data = resp.json()
        assert data["module_name"] == "azure_devops"
        assert len(data["tools"]) == 19

    @pytest.mark.asyncio
    async def test_execute(self, client):
        resp = await client.post("/execute", json={"tool_name": "get_projects", "arguments": {}})
        data = resp.json()
        assert data["success"] is True
        assert data["result"][0]["name"] == "Apollo"

    @pytest.mark.asyncio
    async def test_execute_unknown_tool(self, client):
        resp = await client.post("/execute", json={"tool_name": "nope", "arguments": {}})
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_execute_invalid_params(self, client):
        resp = await client.post("/execute", json={"tool_name": "get_repositories", "arguments": {}})
        assert resp.status_code == 422
        assert "project_id" in resp.json()["detail"]
