"""Wire types for the OpenAI-compatible chat completions API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class FunctionCall:
    """A function the model asks to call; ``arguments`` is a JSON string."""

    name: str = ""
    arguments: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "arguments": self.arguments}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> FunctionCall:
        data = data or {}
        return cls(data.get("name") or "", data.get("arguments") or "")


@dataclass
class ToolCall:
    """A tool invocation requested by the assistant."""

    id: str = ""
    type: str = ""
    function: FunctionCall = field(default_factory=FunctionCall)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "function": self.function.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ToolCall:
        data = data or {}
        return cls(
            data.get("id") or "",
            data.get("type") or "",
            FunctionCall.from_dict(data.get("function")),
        )


@dataclass
class Message:
    """One message of a conversation; empty fields are left off the wire."""

    role: str = ""
    content: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)
    tool_call_id: str = ""
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "role": self.role,
            "content": self.content,
            "tool_calls": [call.to_dict() for call in self.tool_calls],
            "tool_call_id": self.tool_call_id,
            "name": self.name,
        }
        return {key: value for key, value in out.items() if key == "role" or value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Message:
        data = data or {}
        return cls(
            role=data.get("role") or "",
            content=data.get("content") or "",
            tool_calls=[ToolCall.from_dict(item) for item in data.get("tool_calls") or []],
            tool_call_id=data.get("tool_call_id") or "",
            name=data.get("name") or "",
        )


@dataclass
class FunctionDefinition:
    """A function offered to the model, with a JSON schema for its parameters."""

    name: str
    description: str = ""
    parameters: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.description:
            out["description"] = self.description
        out["parameters"] = self.parameters
        return out


@dataclass
class Tool:
    """A tool offered to the model."""

    type: str
    function: FunctionDefinition

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "function": self.function.to_dict()}


@dataclass
class Request:
    """A chat completion request; empty optional fields are left off the wire."""

    model: str
    messages: list[Message]
    tools: list[Tool] = field(default_factory=list)
    tool_choice: Any = None
    max_tokens: int = 0
    temperature: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        optional = {
            "tools": [tool.to_dict() for tool in self.tools],
            "tool_choice": self.tool_choice,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        out: dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
        }
        out.update((key, value) for key, value in optional.items() if value)
        return out


@dataclass
class Usage:
    """Token accounting reported by the API."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Usage:
        data = data or {}
        return cls(
            data.get("prompt_tokens") or 0,
            data.get("completion_tokens") or 0,
            data.get("total_tokens") or 0,
        )


@dataclass
class Choice:
    """One completion choice."""

    index: int = 0
    message: Message = field(default_factory=Message)
    finish_reason: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Choice:
        data = data or {}
        return cls(
            data.get("index") or 0,
            Message.from_dict(data.get("message")),
            data.get("finish_reason") or "",
        )


@dataclass
class Response:
    """A chat completion response."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[Choice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Response:
        data = data or {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[Choice.from_dict(item) for item in data.get("choices") or []],
            usage=Usage.from_dict(data.get("usage")),
        )