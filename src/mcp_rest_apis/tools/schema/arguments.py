"""Typed argument models for the built-in tools and the validation entry point."""

import json
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ...exceptions import ValidationError
from ...logger import get_logger

logger = get_logger(__name__)

HttpMethod = Literal["POST", "GET", "PUT", "DELETE"]

# Only these methods ever carry a request body.
BODY_METHODS = frozenset({"POST", "PUT"})

A = TypeVar("A", bound="ToolArguments")


class ToolArguments(BaseModel):
    """Base for validated tool arguments.

    Strict mode: a value of the wrong primitive type is rejected, never coerced.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class HttpRequestArgs(ToolArguments):
    """Arguments of the ``request`` tool."""

    type: Annotated[HttpMethod, Field(description="Type of the request. GET, POST, PUT, DELETE")]
    url: Annotated[str, Field(description="Url to make the request to")]
    headers: Annotated[Dict[str, str], Field(description="Headers to include in the request")]
    body: Annotated[Any, Field(description="Body to include in the request")]

    def payload(self) -> Optional[str]:
        """Serialize the body for the wire.

        Returns:
            The JSON text of the body for POST and PUT requests with a non-empty
            body, otherwise None. GET and DELETE never carry a body.
        """
        if self.type not in BODY_METHODS or _is_empty(self.body):
            return None
        return json.dumps(self.body)


class SaveFileArgs(ToolArguments):
    """Arguments of the ``save_environment_variable_or_api_doc`` tool."""

    file_name: Annotated[str, Field(description="What the file will be named")]
    file_content: Annotated[str, Field(description="Content of the file to save")]


class GetFileArgs(ToolArguments):
    """Arguments of the ``get_file`` tool."""

    file_name: Annotated[str, Field(description="Name of the file to get")]


class ListFilesArgs(ToolArguments):
    """The ``list_files`` tool takes no arguments."""


def validate_arguments(model: Type[A], tool_name: str, arguments: Mapping[str, Any]) -> A:
    """Check ``arguments`` against ``model`` and build the typed projection.

    Args:
        model: The argument model of the tool.
        tool_name: Name of the tool, for diagnostics.
        arguments: Raw arguments of the tool call.

    Returns:
        The validated arguments.

    Raises:
        ValidationError: If any field is missing or has the wrong type. The
            message lists every offending field.
    """
    try:
        return model.model_validate(dict(arguments))
    except PydanticValidationError as e:
        msg = format_validation_errors(e)
        logger.warning("Validation failed for tool '%s': %s", tool_name, msg)
        raise ValidationError(msg) from e


def format_validation_errors(error: PydanticValidationError) -> str:
    """Join all field errors of a pydantic error into one readable message."""
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "arguments"
        if err["type"] == "missing":
            reason = "missing required field"
        elif err["type"].endswith("_type"):
            reason = f"wrong type ({err['msg']})"
        else:
            reason = f"invalid value ({err['msg']})"
        problems.append(f"{field}: {reason}")
    return "Invalid arguments: " + "; ".join(problems)


def _is_empty(body: Any) -> bool:
    return body is None or (isinstance(body, (str, dict, list)) and len(body) == 0)
