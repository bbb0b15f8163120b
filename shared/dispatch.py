"""Tool dispatcher — routes a tool call to its handler.

    call(name, args)
      → exact-name lookup in the manifest        (MethodNotFoundError)
      → argument validation                      (InvalidParamsError)
      → handler on the tools object              (one or more HTTP calls)
      → PlatformError / httpx error → ToolResult(success=False)

Tools objects expose one async method per catalogued tool, named exactly
like the tool.
"""

from __future__ import annotations

import inspect
from typing import Any

import httpx
import structlog

from shared.errors import InvalidParamsError, MethodNotFoundError, PlatformError, translate_error
from shared.log import sanitize_args
from shared.schemas.tools import ModuleManifest, ToolResult
from shared.validation import build_args_model, validate_arguments

logger = structlog.get_logger()


class ToolDispatcher:
    """Dispatches tool calls for one platform server."""

    def __init__(self, manifest: ModuleManifest, tools: Any):
        self.manifest = manifest
        self.tools = tools
        self._models = {}
        self._handlers = {}

        missing = []
        for tool in manifest.tools:
            if tool.name in self._handlers:
                raise ValueError(f"Duplicate tool name in {manifest.module_name} manifest: {tool.name}")
            handler = getattr(tools, tool.name, None)
            if handler is None or not inspect.iscoroutinefunction(handler):
                missing.append(tool.name)
                continue
            self._handlers[tool.name] = handler
            self._models[tool.name] = build_args_model(tool)
        if missing:
            raise TypeError(
                f"{type(tools).__name__} has no async handler for: {', '.join(missing)}"
            )

    @property
    def platform(self) -> str:
        return self.manifest.platform

    async def call(self, name: str, arguments: dict | None = None) -> ToolResult:
        """Execute one tool invocation and return exactly one result."""
        tool = self.manifest.get_tool(name)
        if tool is None:
            logger.warning("unknown_tool", server=self.manifest.module_name, tool=name)
            raise MethodNotFoundError(f"Unknown tool: {name}")

        try:
            kwargs = validate_arguments(tool, self._models[name], arguments)
        except InvalidParamsError as e:
            logger.warning("invalid_params", tool=name, missing=e.missing, error=e.message)
            raise

        logger.info("tool_call", server=self.manifest.module_name, tool=name, arguments=sanitize_args(kwargs))
        try:
            result = await self._handlers[name](**kwargs)
        except (PlatformError, httpx.HTTPError) as e:
            err = translate_error(self.platform, e)
            logger.warning("tool_platform_error", tool=name, error=err.message)
            return ToolResult(tool_name=name, success=False, error=err.message)

        return ToolResult(tool_name=name, success=True, result=result)

    async def aclose(self) -> None:
        """Release the platform client held by the tools object."""
        close = getattr(self.tools, "aclose", None)
        if close is not None:
            await close()
