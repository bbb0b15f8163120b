"""Tool catalog and tool call schemas."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel


class ToolParameter(BaseModel):
    """Parameter definition for a tool."""

    name: str
    type: str  # string, integer, boolean, number, array, object
    description: str
    required: bool = True
    enum: list[str] | None = None
    items: dict | None = None  # JSON schema for array elements
    default: Any = None

    def json_schema(self) -> dict:
        prop: dict = {"type": self.type, "description": self.description}
        if self.enum:
            prop["enum"] = self.enum
        if self.items:
            prop["items"] = self.items
        if self.default is not None:
            prop["default"] = self.default
        return prop


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by a server."""

    name: str  # e.g. "create_branch"
    description: str
    parameters: list[ToolParameter] = []

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict:
        """JSON schema advertised to the client for this tool's arguments."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": self.required,
        }


class ModuleManifest(BaseModel):
    """Manifest describing a platform server and its tool catalog."""

    module_name: str
    platform: str  # human name used in error messages, e.g. "Azure DevOps"
    description: str
    tools: list[ToolDefinition]

    def get_tool(self, name: str) -> ToolDefinition | None:
        """Exact-name lookup. No prefix or case-insensitive matching."""
        for tool in self.tools:
            if tool.name == name:
                return tool
        return None

    @property
    def tool_names(self) -> list[str]:
        return [t.name for t in self.tools]


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict = {}


class ToolResult(BaseModel):
    """Result from a tool execution."""

    tool_name: str
    success: bool
    result: Any = None
    error: str | None = None

    def as_text(self) -> str:
        """Render the result the way it is returned over the protocol channel."""
        if not self.success:
            return self.error or "Unknown error"
        if isinstance(self.result, str):
            return self.result
        return json.dumps(self.result, indent=2)
