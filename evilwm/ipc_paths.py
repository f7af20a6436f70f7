"""Paths, limits and error payloads for the compositor's IPC socket."""

from __future__ import annotations

import itertools
import json
import os
from pathlib import Path
from typing import Optional, Union

MAX_IPC_REQUEST_BYTES = 1024 * 1024

_socket_counter = itertools.count(1)

PathArg = Union[str, "os.PathLike[str]"]


class IpcRequestTooLarge(ValueError):
    """Raised when an IPC request exceeds :data:`MAX_IPC_REQUEST_BYTES`."""

    def __init__(self, size: int) -> None:
        super().__init__(f"ipc request exceeds {MAX_IPC_REQUEST_BYTES} bytes")
        self.size = size


class ScreenshotPathError(ValueError):
    """Raised when a requested screenshot path is not acceptable."""


def _temp_dir() -> Path:
    return Path(os.environ.get("TMPDIR") or "/tmp")


def make_ipc_socket_path(runtime_dir: Optional[PathArg] = None) -> Path:
    """Return a fresh, process-unique socket path inside ``runtime_dir``.

    Without ``runtime_dir`` the directory is ``$XDG_RUNTIME_DIR``, falling back to
    the temporary directory.
    """
    if runtime_dir is None:
        xdg = os.environ.get("XDG_RUNTIME_DIR")
        base = Path(xdg) if xdg is not None else _temp_dir()
    else:
        base = Path(runtime_dir)
    unique = next(_socket_counter)
    return base / f"evilwm-ipc-{os.getpid()}-{unique}.sock"


def check_request_size(request: Union[str, bytes]) -> int:
    """Return the request's size in bytes, raising if it is over the limit."""
    size = len(request.encode("utf-8")) if isinstance(request, str) else len(request)
    if size > MAX_IPC_REQUEST_BYTES:
        raise IpcRequestTooLarge(size)
    return size


def error_response_json(message: str) -> str:
    """Encode an IPC error response."""
    return json.dumps({"type": "error", "message": message}, separators=(",", ":"))


def validate_screenshot_path(path: PathArg) -> Path:
    """Resolve a screenshot destination and check that it lies under $HOME or the temp dir.

    The parent directory must exist; it is resolved through symlinks and the file
    name is joined back onto it.
    """
    candidate = Path(path)
    if candidate.is_absolute():
        resolved = candidate
    else:
        try:
            cwd = Path(os.getcwd())
        except OSError as error:
            raise ScreenshotPathError(f"failed to resolve screenshot path: {error}") from error
        resolved = cwd / candidate

    file_name = resolved.name
    if file_name in ("", ".."):
        raise ScreenshotPathError("screenshot path must include a file name")
    parent = resolved.parent
    try:
        canonical_parent = parent.resolve(strict=True)
    except OSError as error:
        raise ScreenshotPathError(
            f"screenshot parent directory must exist: {error}"
        ) from error
    canonical = canonical_parent / file_name

    allowed_roots = []
    home = os.environ.get("HOME")
    if home is not None:
        allowed_roots.append(Path(home))
    temp = _temp_dir()
    allowed_roots.append(temp)

    if any(canonical.is_relative_to(root) for root in allowed_roots):
        return canonical
    raise ScreenshotPathError(f"screenshot path must be under $HOME or {temp}")