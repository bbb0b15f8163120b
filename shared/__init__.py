"""Shared plumbing for the platform MCP servers."""

__version__ = "1.0.0"
