"""Tool argument models and schema helpers."""

from .arguments import (
    BODY_METHODS,
    GetFileArgs,
    HttpMethod,
    HttpRequestArgs,
    ListFilesArgs,
    SaveFileArgs,
    ToolArguments,
    format_validation_errors,
    validate_arguments,
)
from .input_schema import build_input_schema

__all__ = [
    "BODY_METHODS",
    "GetFileArgs",
    "HttpMethod",
    "HttpRequestArgs",
    "ListFilesArgs",
    "SaveFileArgs",
    "ToolArguments",
    "format_validation_errors",
    "validate_arguments",
    "build_input_schema",
]
