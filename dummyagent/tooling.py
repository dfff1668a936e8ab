"""Tool definitions and the JSON schemas that describe their input."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence

from .openai_types import FunctionDefinition, Tool


class ToolError(Exception):
    """Raised when a tool cannot carry out a call."""


@dataclass(frozen=True)
class Definition:
    """A tool: name, description, input schema and a function of a JSON string."""

    name: str
    description: str
    input_schema: dict[str, Any]
    function: Callable[[str], str]

    def to_tool(self) -> Tool:
        return Tool("function", FunctionDefinition(self.name, self.description, self.input_schema))


def generate_schema(
    properties: Mapping[str, str], required: Sequence[str] = ()
) -> dict[str, Any]:
    """Build an object schema of string properties from name-to-description pairs."""
    unknown = [name for name in required if name not in properties]
    if unknown:
        raise ValueError(f"required properties not defined: {', '.join(unknown)}")
    schema: dict[str, Any] = {
        "properties": {
            name: {"type": "string", "description": text} for name, text in properties.items()
        },
        "additionalProperties": False,
        "type": "object",
    }
    if required:
        schema["required"] = list(required)
    return schema


def _string_fields(arguments: str, tool_name: str, names: Iterable[str]) -> dict[str, str]:
    """Decode a JSON object of arguments into the named string fields ("" if absent)."""

    def fail(reason: str) -> ToolError:
        return ToolError(f"failed to parse input for {tool_name}: {reason}. Input was: {arguments}")

    try:
        data = json.loads(arguments)
    except json.JSONDecodeError as exc:
        raise fail(str(exc)) from exc
    data = {} if data is None else data
    if not isinstance(data, dict):
        raise fail(f"expected a JSON object, got {type(data).__name__}")

    fields: dict[str, str] = {}
    for name in names:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise fail(f"field '{name}' must be a string")
        fields[name] = value or ""
    return fields