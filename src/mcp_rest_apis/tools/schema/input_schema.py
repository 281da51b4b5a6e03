"""JSON schema advertised to clients for a tool's arguments."""

from typing import Any, Dict, Type

from .arguments import ToolArguments


def build_input_schema(args_model: Type[ToolArguments]) -> Dict[str, Any]:
    """Derive the advertised input schema from an argument model.

    Pydantic adds a ``title`` to the model and to every field, and uses the
    model docstring as ``description``; clients only need the field schemas
    and the list of required names. ``additionalProperties`` is left open
    because unknown arguments are ignored, not rejected.

    Args:
        args_model: The argument model of the tool.

    Returns:
        An object schema with ``properties`` and ``required``.
    """
    raw = args_model.model_json_schema()
    return {
        "type": "object",
        "properties": {name: _without_titles(field) for name, field in raw.get("properties", {}).items()},
        "required": list(raw.get("required", [])),
    }


def _without_titles(node: Any) -> Any:
    if isinstance(node, dict):
        return {key: _without_titles(value) for key, value in node.items() if key != "title"}
    if isinstance(node, list):
        return [_without_titles(item) for item in node]
    return node
