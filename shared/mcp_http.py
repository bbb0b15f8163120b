"""HTTP transport — FastAPI app serving one platform's tools.

Routes:
  POST /mcp        JSON-RPC 2.0 (initialize, ping, tools/list, tools/call)
  GET  /manifest   the tool catalog
  POST /execute    ToolCall → ToolResult
  GET  /health
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from shared import __version__
from shared.dispatch import ToolDispatcher
from shared.errors import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    PARSE_ERROR,
    InvalidParamsError,
    MethodNotFoundError,
    ToolError,
)
from shared.schemas.common import HealthResponse
from shared.schemas.tools import ModuleManifest, ToolCall, ToolResult

logger = structlog.get_logger()

PROTOCOL_VERSION = "2024-11-05"


def _make_response(request_id: Any, result: dict) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def _make_error(request_id: Any, code: int, message: str) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def create_app(dispatcher: ToolDispatcher) -> FastAPI:
    """Create the FastAPI app for a dispatcher."""
    manifest = dispatcher.manifest
    server_name = f"{manifest.module_name.replace('_', '-')}-mcp-server"
    app = FastAPI(title=f"{manifest.platform} MCP Server", version=__version__)
    app.state.dispatcher = dispatcher

    @app.on_event("shutdown")
    async def shutdown():
        await dispatcher.aclose()

    async def route(method: str, params: dict) -> dict:
        if method == "initialize":
            client = (params.get("clientInfo") or {}).get("name", "?")
            logger.info("client_initialize", client=client, protocol=params.get("protocolVersion"))
            return {
                "protocolVersion": params.get("protocolVersion") or PROTOCOL_VERSION,
                "capabilities": {"tools": {}},
                "serverInfo": {"name": server_name, "version": __version__},
            }
        if method == "ping":
            return {}
        if method == "tools/list":
            return {
                "tools": [
                    {"name": t.name, "description": t.description, "inputSchema": t.input_schema()}
                    for t in manifest.tools
                ]
            }
        if method == "tools/call":
            name = params.get("name")
            arguments = params.get("arguments") or {}
            if not name or not isinstance(name, str):
                raise InvalidParamsError("Missing tool name", missing=["name"])
            if not isinstance(arguments, dict):
                raise InvalidParamsError("arguments must be an object")
            result = await dispatcher.call(name, arguments)
            return {
                "content": [{"type": "text", "text": result.as_text()}],
                "isError": not result.success,
            }
        raise MethodNotFoundError(f"Unknown method: {method}")

    @app.post("/mcp")
    async def mcp_endpoint(request: Request):
        try:
            msg = await request.json()
        except ValueError:
            return JSONResponse(_make_error(None, PARSE_ERROR, "Parse error"))

        if not isinstance(msg, dict) or msg.get("jsonrpc") != "2.0" or not isinstance(msg.get("method"), str):
            return JSONResponse(_make_error(None, INVALID_REQUEST, "Invalid JSON-RPC 2.0 request"))

        # Notifications get no response body
        if "id" not in msg:
            return Response(status_code=202)

        request_id = msg["id"]
        params = msg.get("params")
        try:
            if params is None:
                params = {}
            elif not isinstance(params, dict):
                raise InvalidParamsError("params must be an object")
            result = await route(msg["method"], params)
        except ToolError as e:
            logger.warning("protocol_error", method=msg["method"], code=e.code, error=e.message)
            return JSONResponse(_make_error(request_id, e.code, e.message))
        except Exception as e:
            logger.error("unhandled_error", method=msg["method"], error=str(e), exc_info=True)
            return JSONResponse(_make_error(request_id, INTERNAL_ERROR, str(e)))
        return JSONResponse(_make_response(request_id, result))

    @app.get("/manifest", response_model=ModuleManifest)
    async def get_manifest():
        """Return the tool catalog."""
        return manifest

    @app.post("/execute", response_model=ToolResult)
    async def execute(call: ToolCall):
        """Execute a tool call."""
        try:
            return await dispatcher.call(call.tool_name, call.arguments)
        except MethodNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
        except InvalidParamsError as e:
            raise HTTPException(status_code=422, detail=e.message)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", server=server_name, tools=len(manifest.tools))

    return app


async def run_http(dispatcher: ToolDispatcher, port: int, host: str = "0.0.0.0") -> None:
    """Serve the FastAPI app with uvicorn until interrupted."""
    import uvicorn

    logger.info(
        "server_starting",
        server=dispatcher.manifest.module_name,
        transport="http",
        endpoint=f"http://localhost:{port}/mcp",
    )
    config = uvicorn.Config(create_app(dispatcher), host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)
    await server.serve()
    logger.info("server_stopped", server=dispatcher.manifest.module_name)
