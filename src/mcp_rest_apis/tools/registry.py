"""Read-only registry mapping tool names to their definitions."""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Type

from .models import ToolDefinition, ToolHandler
from .schema import ToolArguments, build_input_schema
from ..exceptions import UnknownToolError
from ..logger import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    The fixed set of tools served by one process.

    The registry is built once at startup and cannot be changed afterwards; it
    is passed to the dispatcher and the transport instead of living in a
    module-level variable.
    """

    def __init__(self, tools: Iterable[ToolDefinition]) -> None:
        """Initialize the registry.

        Args:
            tools: The tool definitions. Names must be unique.

        Raises:
            ValueError: If two tools share a name.
        """
        table: Dict[str, ToolDefinition] = {}
        for tool in tools:
            if tool.name in table:
                msg = f"Tool '{tool.name}' is already registered."
                logger.error(msg)
                raise ValueError(msg)
            table[tool.name] = tool
            logger.debug("Registered tool: '%s'", tool.name)
        self._tools: Mapping[str, ToolDefinition] = MappingProxyType(table)

    @property
    def tools(self) -> Mapping[str, ToolDefinition]:
        """Read-only mapping of tool name to definition."""
        return self._tools

    def get(self, name: str) -> ToolDefinition:
        """Look up a tool by name.

        Raises:
            UnknownToolError: If no tool of that name exists.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def descriptors(self) -> List[ToolDefinition]:
        """All tool definitions in registration order."""
        return list(self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    @staticmethod
    def define(name: str, description: str, args_model: Type[ToolArguments], handler: ToolHandler) -> ToolDefinition:
        """Create a ToolDefinition whose input schema is derived from ``args_model``.

        Args:
            name: The tool name.
            description: What the tool does.
            args_model: Pydantic model of the tool's arguments.
            handler: Coroutine function run with the validated arguments.

        Returns:
            The tool definition.
        """
        parameters = build_input_schema(args_model)

        return ToolDefinition(
            name=name,
            description=description,
            parameters=parameters,
            args_model=args_model,
            handler=handler,
        )
