from .models import ToolDefinition, ToolCallRequest, ToolCallResult
from .registry import ToolRegistry
from .dispatcher import ToolDispatcher
from .builtin import build_registry, REQUEST_TOOL, SAVE_FILE_TOOL, GET_FILE_TOOL, LIST_FILES_TOOL
from .schema import build_input_schema

__all__ = [
    "ToolDefinition",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolRegistry",
    "ToolDispatcher",
    "build_registry",
    "REQUEST_TOOL",
    "SAVE_FILE_TOOL",
    "GET_FILE_TOOL",
    "LIST_FILES_TOOL",
    "build_input_schema",
]
