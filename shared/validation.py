"""Argument validation for tool calls.

Each tool's parameter list is turned into a pydantic model once, at
dispatcher construction. Validating a call is a single pass through that
model: it either yields typed keyword arguments or the complete list of
violations. Array parameters with an ``items`` schema are checked element
by element, so a malformed file list never reaches a handler.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, create_model

from shared.errors import InvalidParamsError
from shared.schemas.tools import ToolDefinition

_TYPE_MAP: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "array": list,
    "object": dict,
}


class _ArgsBase(BaseModel):
    # Clients routinely send ids as numbers; accept them for string params.
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


class _ItemBase(BaseModel):
    # Unknown keys on array elements (e.g. a message "name") pass through.
    model_config = ConfigDict(extra="allow")


def _schema_type(schema: dict | None, name: str) -> Any:
    """Python type for a JSON schema fragment nested inside an array."""
    if not schema:
        return Any
    if schema.get("enum"):
        return Literal[tuple(schema["enum"])]
    kind = schema.get("type")
    if kind == "string":
        return StrictStr
    if kind == "array":
        return list[_schema_type(schema.get("items"), name)]
    if kind == "object" and schema.get("properties"):
        required = set(schema.get("required", ()))
        fields: dict[str, Any] = {}
        for prop, sub in schema["properties"].items():
            sub_type = _schema_type(sub, f"{name}{prop.title()}")
            fields[prop] = (sub_type, ...) if prop in required else (sub_type | None, None)
        return create_model(name, __base__=_ItemBase, **fields)
    return _TYPE_MAP.get(kind, Any)


def _model_name(tool_name: str) -> str:
    return "".join(part.title() for part in tool_name.split("_"))


def build_args_model(tool: ToolDefinition) -> type[BaseModel]:
    """Create the pydantic model for a tool's arguments."""
    fields: dict[str, Any] = {}
    for param in tool.parameters:
        py_type = _TYPE_MAP.get(param.type, Any)
        if param.enum:
            py_type = Literal[tuple(param.enum)]
        elif param.type == "array" and param.items:
            item_name = _model_name(tool.name) + _model_name(param.name) + "Item"
            py_type = list[_schema_type(param.items, item_name)]
        if param.required:
            fields[param.name] = (py_type, ...)
        else:
            fields[param.name] = (py_type | None, param.default)
    return create_model(_model_name(tool.name) + "Args", __base__=_ArgsBase, **fields)


def _present(arguments: dict | None) -> dict:
    """Drop absent values. ``None`` and empty strings count as not supplied."""
    if not arguments:
        return {}
    return {k: v for k, v in arguments.items() if v is not None and v != ""}


def validate_arguments(tool: ToolDefinition, model: type[BaseModel], arguments: dict | None) -> dict:
    """Validate ``arguments`` for ``tool``.

    Returns the typed keyword arguments for the handler (unset optionals
    without a default are omitted so the handler's own defaults apply).
    Raises ``InvalidParamsError`` listing every violation.
    """
    try:
        parsed = model.model_validate(_present(arguments))
    except ValidationError as exc:
        missing: list[str] = []
        violations: list[str] = []
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"]) or "arguments"
            if err["type"] == "missing" and len(err["loc"]) == 1:
                missing.append(field)
            else:
                violations.append(f"{field}: {err['msg']}")

        parts = []
        if missing:
            parts.append(f"Missing required parameters: {', '.join(missing)}")
        if violations:
            parts.append("; ".join(violations))
        raise InvalidParamsError(
            f"{tool.name}: " + ". ".join(parts),
            missing=missing,
            violations=violations,
        ) from None
    return parsed.model_dump(exclude_none=True)


def clamp_int(val, default: int, lo: int, hi: int) -> int:
    """Clamp an integer parameter to safe range."""
    try:
        v = int(val) if val is not None else default
    except (TypeError, ValueError):
        return default
    return max(lo, min(hi, v))
