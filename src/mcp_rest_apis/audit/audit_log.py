"""Append-only audit log of tool request and response payloads."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..logger import get_logger

logger = get_logger(__name__)


class AuditLog:
    """
    Writes one line per entry to a fixed log file.

    The format of a line is ``<timestamp> | <tag>: <json payload>``. The log is
    never read back or rotated by the server, and writing to it must never break
    a tool call: every failure is reported on the diagnostic logger and dropped.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the audit log.

        Args:
            path: Location of the log file. Relative paths resolve against the working directory.
        """
        self.path = Path(path)

    def append(self, tag: str, payload: Any) -> None:
        """Append one timestamped entry.

        Args:
            tag: Entry kind, ``"request"`` or ``"response"``.
            payload: Any value; values JSON cannot encode are stringified.
        """
        try:
            line = f"{_timestamp()} | {tag}: {json.dumps(payload, default=str, separators=(',', ':'))}\n"
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(line)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing to audit log '%s': %s", self.path, e)


def _timestamp() -> str:
    # ISO-8601 in UTC with millisecond precision, e.g. 2024-12-11T09:30:00.123Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
