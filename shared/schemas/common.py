"""Common schemas used across servers."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Standard health check response."""

    status: str = "ok"
    server: str | None = None
    tools: int = 0
