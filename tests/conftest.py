import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import httpx
import pytest

from mcp_rest_apis.audit import AuditLog
from mcp_rest_apis.http import HttpExecutor
from mcp_rest_apis.storage import FileStore
from mcp_rest_apis.tools import ToolDispatcher, ToolRegistry, build_registry


class RecordingHandler:
    """httpx.MockTransport handler that remembers every request it answered."""

    def __init__(self, status: int = 200, text: str = "ok", headers: Optional[Dict[str, str]] = None) -> None:
        self.status = status
        self.text = text
        self.headers = headers or {"content-type": "text/plain"}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, text=self.text, headers=self.headers)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers that setup_logging attached during a test."""
    logger = logging.getLogger("mcp_rest_apis")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def http_handler() -> RecordingHandler:
    return RecordingHandler(status=200, text='{"hello": "world"}', headers={"content-type": "application/json"})


@pytest.fixture
def audit_log(tmp_path: Path) -> AuditLog:
    return AuditLog(tmp_path / "logs" / "requests.log")


@pytest.fixture
def executor(http_handler: RecordingHandler, audit_log: AuditLog) -> HttpExecutor:
    return HttpExecutor(timeout=5.0, audit=audit_log, transport=httpx.MockTransport(http_handler))


@pytest.fixture
def file_store(tmp_path: Path) -> FileStore:
    return FileStore(tmp_path / "apis")


@pytest.fixture
def registry(executor: HttpExecutor, file_store: FileStore) -> ToolRegistry:
    return build_registry(executor, file_store)


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> ToolDispatcher:
    return ToolDispatcher(registry, tool_timeout=5.0)
