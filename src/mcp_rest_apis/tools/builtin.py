"""The four tools served by mcp-rest-apis."""

import asyncio
import json

from .models import ToolDefinition
from .registry import ToolRegistry
from .schema import GetFileArgs, HttpRequestArgs, ListFilesArgs, SaveFileArgs
from ..exceptions import RequestError
from ..http import HttpExecutor
from ..logger import get_logger
from ..storage import FileStore

logger = get_logger(__name__)

REQUEST_TOOL = "request"
SAVE_FILE_TOOL = "save_environment_variable_or_api_doc"
GET_FILE_TOOL = "get_file"
LIST_FILES_TOOL = "list_files"


def build_registry(executor: HttpExecutor, store: FileStore) -> ToolRegistry:
    """Create the registry of built-in tools bound to ``executor`` and ``store``.

    Args:
        executor: Executor used by the ``request`` tool.
        store: File store used by the file tools.

    Returns:
        A read-only registry holding the four tools.
    """

    async def request(args: HttpRequestArgs) -> str:
        try:
            outcome = await executor.execute(args.url, args.type, args.headers, args.payload(), body=args.body)
        except RequestError as e:
            raise RequestError(f"There was an error making the request: {e}", status=e.status) from e
        return json.dumps({"response": outcome.model_dump()})

    async def save_file(args: SaveFileArgs) -> str:
        await asyncio.to_thread(store.save, args.file_name, args.file_content)
        return f"Saved file to {args.file_name}"

    async def get_file(args: GetFileArgs) -> str:
        return await asyncio.to_thread(store.get, args.file_name)

    async def list_files(args: ListFilesArgs) -> str:
        names = await asyncio.to_thread(store.list)
        return "\n".join(names)

    tools: list[ToolDefinition] = [
        ToolRegistry.define(
            REQUEST_TOOL,
            "Make an HTTP request. Supports GET, POST, PUT and DELETE; the body is sent as JSON for POST and PUT.",
            HttpRequestArgs,
            request,
        ),
        ToolRegistry.define(
            SAVE_FILE_TOOL,
            "Save an environment variable or api doc to a file in the apis folder",
            SaveFileArgs,
            save_file,
        ),
        ToolRegistry.define(
            GET_FILE_TOOL,
            "Get a file from the apis folder, such as an environment variable or api doc",
            GetFileArgs,
            get_file,
        ),
        ToolRegistry.define(
            LIST_FILES_TOOL,
            "List all files in the apis folder. They might include API docs or environment variables",
            ListFilesArgs,
            list_files,
        ),
    ]
    return ToolRegistry(tools)
