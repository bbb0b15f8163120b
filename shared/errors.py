"""Error types shared by every platform server.

Two tiers:

* ``ToolError`` subclasses are local protocol errors (unknown tool, bad
  arguments). They are raised before any network call and surface as
  JSON-RPC errors.
* ``PlatformError`` is a rejection by the wrapped platform. The dispatcher
  turns it into a normal tool result flagged as an error.

Anything else is a bug and is left to propagate.
"""

from __future__ import annotations

import httpx

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ToolError(Exception):
    """Local protocol error carrying a JSON-RPC error code."""

    code = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MethodNotFoundError(ToolError):
    code = METHOD_NOT_FOUND


class InvalidParamsError(ToolError):
    code = INVALID_PARAMS

    def __init__(self, message: str, missing: list[str] | None = None, violations: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []
        self.violations = violations or []


class PlatformError(Exception):
    """A failure reported by (or while talking to) the wrapped platform."""

    def __init__(self, platform: str, detail: str):
        self.platform = platform
        self.detail = detail
        self.message = f"{platform} API error: {detail}"
        super().__init__(self.message)


def _response_message(response: httpx.Response) -> str | None:
    """Pull a human-readable message out of a platform error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None

    if isinstance(body.get("message"), str) and body["message"]:
        return body["message"]

    # Google APIs and LiteLLM: {"error": {"message": ...}} or {"error": "..."}
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error

    # SonarQube: {"errors": [{"msg": ...}]}
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        msg = errors[0].get("msg") or errors[0].get("message")
        if msg:
            return str(msg)
    return None


def translate_error(platform: str, exc: Exception) -> PlatformError:
    """Normalise a platform failure into a ``PlatformError``.

    Only two shapes are recognised: an existing ``PlatformError`` (returned
    unchanged) and an httpx error. Any other exception is re-raised.
    """
    if isinstance(exc, PlatformError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        detail = _response_message(exc.response) or str(exc)
        return PlatformError(platform, detail)
    if isinstance(exc, httpx.HTTPError):
        return PlatformError(platform, str(exc) or exc.__class__.__name__)
    raise exc
