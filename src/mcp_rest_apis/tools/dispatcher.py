"""Dispatch of tool calls to their handlers."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict

from .models import ToolCallRequest, ToolCallResult, ToolDefinition
from .registry import ToolRegistry
from .schema import ToolArguments, validate_arguments
from ..exceptions import ToolError, ToolExecutionError, ValidationError
from ..logger import get_logger

logger = get_logger(__name__)

DEFAULT_TOOL_TIMEOUT = 60.0


class ToolDispatcher:
    """Runs tool calls against a registry, one at a time.

    Every per-call failure is turned into an error ``ToolCallResult``; the
    caller never sees an exception for a bad tool name, bad arguments, a failed
    HTTP call or a file error.
    """

    # Exceptions reported back to the caller. Anything else is a bug and propagates.
    RECOVERABLE_ERRORS = (ToolError, OSError)

    def __init__(self, registry: ToolRegistry, tool_timeout: float = DEFAULT_TOOL_TIMEOUT) -> None:
        """Initialize the dispatcher.

        Args:
            registry: The tools to dispatch to.
            tool_timeout: Timeout in seconds for a single tool call.
        """
        self.registry = registry
        self._tool_timeout = tool_timeout
        # one tool call in flight per process; asyncio.Lock wakes waiters in FIFO order
        self._lock = asyncio.Lock()

    async def call(self, name: str, arguments: Any) -> ToolCallResult:
        """Validate and run one tool call.

        Args:
            name: Name of the tool.
            arguments: Raw arguments (mapping, JSON object string or None).

        Returns:
            The result text, or the error message with ``is_error`` set.
        """
        async with self._lock:
            return await self._handle_tool_call(ToolCallRequest(name=name, arguments=arguments))

    async def _handle_tool_call(self, tool_call: ToolCallRequest) -> ToolCallResult:
        logger.debug("Handling tool call: %s", tool_call.name)
        try:
            tool_def = self.registry.get(tool_call.name)
            function_args = self._normalize_arguments(tool_call.arguments)
            validated = validate_arguments(tool_def.args_model, tool_def.name, function_args)

            logger.info("Executing tool '%s'...", tool_def.name)
            text = await self._execute_tool(tool_def, validated)
        except self.RECOVERABLE_ERRORS as exc:
            msg = str(exc)
            logger.warning("Tool call '%s' failed: %s (%s)", tool_call.name, msg, type(exc).__name__)
            return ToolCallResult(name=tool_call.name, text=msg, is_error=True)

        logger.info("Tool '%s' executed successfully.", tool_call.name)
        return ToolCallResult(name=tool_call.name, text=text)

    @staticmethod
    def _normalize_arguments(raw_args: Any) -> Dict[str, Any]:
        """Normalize tool arguments into a dictionary.

        Handles JSON strings, mappings, or None values.

        Raises:
            ValidationError: If the arguments are not a JSON object.
        """
        if raw_args is None or raw_args == "":
            return {}

        if isinstance(raw_args, dict):
            return raw_args

        if isinstance(raw_args, str):
            try:
                parsed = json.loads(raw_args)
            except json.JSONDecodeError as exc:
                raise ValidationError(f"Invalid arguments: not valid JSON ({exc})") from exc
            if parsed is None:
                return {}
            if not isinstance(parsed, dict):
                raise ValidationError("Invalid arguments: must be a JSON object")
            return parsed

        try:
            return dict(raw_args)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid arguments: must be a JSON object ({exc})") from exc

    async def _execute_tool(self, tool_def: ToolDefinition, arguments: ToolArguments) -> str:
        try:
            return await asyncio.wait_for(tool_def.handler(arguments), timeout=self._tool_timeout)
        except asyncio.TimeoutError as exc:
            msg = f"Tool '{tool_def.name}' timed out after {self._tool_timeout} seconds."
            raise ToolExecutionError(msg) from exc
