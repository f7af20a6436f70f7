"""JSON-lines event log and IPC trace files written by the compositor."""

from __future__ import annotations

import json
import os
import sys
import time
from pathlib import Path
from typing import Any, Optional, Union

PathArg = Union[str, "os.PathLike[str]"]

_U64_MAX = 2**64 - 1

REQUESTS_FILE = "requests.jsonl"
RESPONSES_FILE = "responses.jsonl"


def initialize_jsonl_file(path: PathArg) -> None:
    """Create (or truncate) a JSON-lines file, creating its parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.open("w", encoding="utf-8").close()


def append_jsonl(path: PathArg, value: Any) -> None:
    """Append ``value`` as one compact JSON line, creating the file if needed."""
    line = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line)
        handle.write("\n")


def initialize_ipc_trace_dir(directory: PathArg) -> None:
    """Create the trace directory with empty request and response logs."""
    base = Path(directory)
    base.mkdir(parents=True, exist_ok=True)
    initialize_jsonl_file(base / REQUESTS_FILE)
    initialize_jsonl_file(base / RESPONSES_FILE)


def format_live_hook_error(hook_name: str, error: object) -> str:
    """The message reported when a configuration hook fails."""
    return f"[evilwm] lua hook error: evil.on.{hook_name} — {error}"


class EventLog:
    """Sequenced structured events appended to a JSON-lines file.

    With no path every event is dropped.
    """

    def __init__(self, path: Optional[PathArg] = None) -> None:
        self.path = Path(path) if path is not None else None
        self.sequence = 0
        self._start = time.monotonic()
        if self.path is not None:
            initialize_jsonl_file(self.path)

    def emit(self, kind: str, data: Any) -> Optional[dict[str, Any]]:
        """Record one event; return the entry written, or None when logging is off."""
        if self.path is None:
            return None
        self.sequence = min(self.sequence + 1, _U64_MAX)
        entry = {
            "seq": self.sequence,
            "elapsed_ms": int((time.monotonic() - self._start) * 1000),
            "kind": kind,
            "data": data,
        }
        try:
            append_jsonl(self.path, entry)
        except OSError as error:
            print(f"failed to append event log {self.path}: {error}", file=sys.stderr)
        return entry

    def property_changed(
        self, window_id: int, prop: str, old_value: Any, new_value: Any
    ) -> Optional[dict[str, Any]]:
        """Record a change of one window property with its old and new values."""
        return self.emit(
            "window_property_changed",
            {
                "id": window_id,
                "property": prop,
                "old_value": old_value,
                "new_value": new_value,
            },
        )


class IpcTrace:
    """Raw IPC requests and responses traced into a directory of JSON-lines files."""

    def __init__(self, directory: Optional[PathArg] = None) -> None:
        self.directory = Path(directory) if directory is not None else None
        if self.directory is not None:
            initialize_ipc_trace_dir(self.directory)

    def trace(self, file_name: str, payload: Any) -> bool:
        """Append ``payload`` to ``file_name`` in the trace directory; return whether it was written."""
        if self.directory is None:
            return False
        path = self.directory / file_name
        try:
            append_jsonl(path, payload)
        except OSError as error:
            print(f"failed to append ipc trace {path}: {error}", file=sys.stderr)
            return False
        return True