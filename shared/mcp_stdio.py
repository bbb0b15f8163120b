"""stdio transport — binds a ToolDispatcher to the MCP SDK server."""

from __future__ import annotations

import asyncio
import signal

import mcp.types as types
import structlog
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from shared import __version__
from shared.dispatch import ToolDispatcher
from shared.errors import ToolError

logger = structlog.get_logger()


def create_mcp_server(dispatcher: ToolDispatcher) -> Server:
    """Build an MCP server exposing the dispatcher's catalog."""
    manifest = dispatcher.manifest
    server = Server(f"{manifest.module_name.replace('_', '-')}-mcp-server", version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=t.name, description=t.description, inputSchema=t.input_schema())
            for t in manifest.tools
        ]

    # Registered directly rather than through @server.call_tool(): the
    # decorator turns every exception into an isError result, but unknown
    # tools and bad arguments must reach the client as JSON-RPC errors.
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await dispatcher.call(req.params.name, req.params.arguments or {})
        except ToolError as e:
            raise McpError(types.ErrorData(code=e.code, message=e.message)) from e
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.as_text())],
                isError=not result.success,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def run_stdio(dispatcher: ToolDispatcher) -> None:
    """Serve over stdin/stdout until EOF, SIGINT or SIGTERM."""
    server = create_mcp_server(dispatcher)
    task = asyncio.current_task()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, task.cancel)
        except NotImplementedError:
            pass  # Windows

    logger.info("server_starting", server=dispatcher.manifest.module_name, transport="stdio")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except asyncio.CancelledError:
        logger.info("server_interrupted", server=dispatcher.manifest.module_name)
    finally:
        await dispatcher.aclose()
        logger.info("server_stopped", server=dispatcher.manifest.module_name)
