"""Data models for tool definitions and tool calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Type

from pydantic import BaseModel, ConfigDict

from .schema import ToolArguments

ToolHandler = Callable[[Any], Awaitable[str]]


class ToolDefinition(BaseModel):
    """
    Represents a tool exposed by the server.

    Attributes:
        name: The unique name of the tool, used as the dispatch key.
        description: A brief description of what the tool does.
        parameters: The JSON schema advertised to clients for the tool's input.
        args_model: Pydantic model used to validate the arguments of a call.
        handler: Coroutine function receiving the validated arguments and returning the result text.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    parameters: Dict[str, Any]
    args_model: Type[ToolArguments]
    handler: ToolHandler


@dataclass(frozen=True)
class ToolCallRequest:
    """One incoming tool call."""

    name: str
    arguments: Any


@dataclass(frozen=True)
class ToolCallResult:
    """The outcome of one tool call, either result text or an error message."""

    name: str
    text: str
    is_error: bool = False
