import json
import os
import re

import pytest

from evilwm.ipc_paths import (
    MAX_IPC_REQUEST_BYTES,
    IpcRequestTooLarge,
    ScreenshotPathError,
    check_request_size,
    error_response_json,
    make_ipc_socket_path,
    validate_screenshot_path,
)


@pytest.fixture
def roots(tmp_path, monkeypatch):
    base = tmp_path.resolve()
    home = base / "home"
    tmp = base / "tmp"
    other = base / "other"
    for directory in (home, tmp, other):
        directory.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("TMPDIR", str(tmp))
    return home, tmp, other


def test_socket_path_lives_in_runtime_dir(tmp_path):
    path = make_ipc_socket_path(tmp_path)
    assert path.parent == tmp_path
    assert re.fullmatch(rf"evilwm-ipc-{os.getpid()}-\d+\.sock", path.name)


def test_socket_paths_are_unique(tmp_path):
    first = make_ipc_socket_path(tmp_path)
    second = make_ipc_socket_path(tmp_path)
    assert first != second


def test_socket_path_defaults_to_xdg_runtime_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
    assert make_ipc_socket_path().parent == tmp_path


def test_socket_path_falls_back_to_temp_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)
    monkeypatch.setenv("TMPDIR", str(tmp_path))
    assert make_ipc_socket_path().parent == tmp_path


def test_request_size_returns_byte_length():
    request = '{"type":"quit"}'
    assert check_request_size(request) == len(request)
    assert check_request_size(request.encode()) == len(request)


def test_request_at_limit_is_accepted():
    assert check_request_size("a" * MAX_IPC_REQUEST_BYTES) == MAX_IPC_REQUEST_BYTES


def test_request_over_limit_is_rejected():
    with pytest.raises(IpcRequestTooLarge) as info:
        check_request_size("a" * (MAX_IPC_REQUEST_BYTES + 1))
    assert info.value.size == MAX_IPC_REQUEST_BYTES + 1
    assert str(info.value) == f"ipc request exceeds {MAX_IPC_REQUEST_BYTES} bytes"


def test_request_size_counts_utf8_bytes():
    request = "é" * (MAX_IPC_REQUEST_BYTES // 2 + 1)
    with pytest.raises(IpcRequestTooLarge):
        check_request_size(request)


def test_error_response_round_trips():
    message = 'bad "request"\nline two'
    assert json.loads(error_response_json(message)) == {"type": "error", "message": message}


def test_error_response_wire_format():
    assert error_response_json("boom") == '{"type":"error","message":"boom"}'


def test_absolute_path_under_home(roots):
    home, _, _ = roots
    assert validate_screenshot_path(home / "shot.ppm") == home / "shot.ppm"


def test_path_under_temp_dir(roots):
    _, tmp, _ = roots
    assert validate_screenshot_path(str(tmp / "shot.ppm")) == tmp / "shot.ppm"


def test_relative_path_resolves_against_cwd(roots, monkeypatch):
    home, _, _ = roots
    monkeypatch.chdir(home)
    assert validate_screenshot_path("shot.ppm") == home / "shot.ppm"


def test_symlinked_parent_is_resolved(roots):
    home, _, _ = roots
    real = home / "real"
    real.mkdir()
    link = home / "link"
    os.symlink(real, link)
    assert validate_screenshot_path(link / "shot.ppm") == real / "shot.ppm"


def test_missing_parent_is_rejected(roots):
    home, _, _ = roots
    with pytest.raises(ScreenshotPathError, match="parent directory must exist"):
        validate_screenshot_path(home / "missing" / "shot.ppm")


def test_path_outside_allowed_roots_is_rejected(roots):
    _, tmp, other = roots
    with pytest.raises(ScreenshotPathError) as info:
        validate_screenshot_path(other / "shot.ppm")
    assert str(info.value) == f"screenshot path must be under $HOME or {tmp}"


def test_root_has_no_file_name(roots):
    with pytest.raises(ScreenshotPathError, match="must include a file name"):
        validate_screenshot_path("/")


def test_parent_reference_has_no_file_name(roots):
    home, _, _ = roots
    with pytest.raises(ScreenshotPathError, match="must include a file name"):
        validate_screenshot_path(f"{home}/..")