"""Argument parsing and JSON reports for the clipboard, primary-selection and DnD probe."""

from __future__ import annotations

import json
import re
import sys
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional, Sequence

DEFAULT_MIME = "text/plain;charset=utf-8"
DEFAULT_PAYLOAD = "evilwm transfer probe"
DEFAULT_TIMEOUT_MS = 3_000

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class ProbeArgumentError(ValueError):
    """Raised when the probe's command line cannot be parsed."""


@dataclass
class ProbeArgs:
    mode: str
    mime: str = DEFAULT_MIME
    payload: str = DEFAULT_PAYLOAD
    timeout: timedelta = timedelta(milliseconds=DEFAULT_TIMEOUT_MS)


def usage() -> str:
    return (
        "Usage: evilwm-transfer-probe <clipboard-source|clipboard-sink|primary-source|"
        "primary-sink|dnd-source|dnd-target> [--mime TYPE] [--payload TEXT] [--timeout-ms N]\n"
        "  clipboard-source  acquire clipboard ownership and serve payload\n"
        "  clipboard-sink    read current clipboard selection\n"
        "  primary-source    acquire primary selection and serve payload\n"
        "  primary-sink      read current primary selection\n"
        "  dnd-source        offer a DnD payload; requires a pointer button press to start_drag\n"
        "  dnd-target        map a surface and wait for a DnD drop (requires a running source)"
    )


def _parse_unsigned(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ProbeArgumentError(f"invalid --timeout-ms value: {text}")
    value = int(text)
    if value > _U64_MAX:
        raise ProbeArgumentError(f"invalid --timeout-ms value: {text}")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> Optional[ProbeArgs]:
    """Parse probe arguments; return None (after printing usage) when help was requested."""
    args = iter(sys.argv[1:] if argv is None else argv)
    mode = next(args, None)
    if mode is None or mode in ("-h", "--help"):
        print(usage())
        return None

    mime = DEFAULT_MIME
    payload = DEFAULT_PAYLOAD
    timeout_ms = DEFAULT_TIMEOUT_MS

    def value_for(flag: str) -> str:
        value = next(args, None)
        if value is None:
            raise ProbeArgumentError(f"{flag} requires a value")
        return value

    for arg in args:
        if arg == "--mime":
            mime = value_for(arg)
        elif arg == "--payload":
            payload = value_for(arg)
        elif arg == "--timeout-ms":
            timeout_ms = _parse_unsigned(value_for(arg))
        elif arg in ("-h", "--help"):
            print(usage())
            return None
        else:
            raise ProbeArgumentError(f"unknown argument: {arg}")

    return ProbeArgs(mode, mime, payload, timedelta(milliseconds=timeout_ms))


def payload_string(payload: Optional[bytes]) -> Optional[str]:
    """Decode a payload as UTF-8, replacing invalid sequences."""
    if payload is None:
        return None
    return bytes(payload).decode("utf-8", errors="replace")


def _payload_len(payload: Optional[bytes]) -> Optional[int]:
    return None if payload is None else len(payload)


def emit_json(value: Any) -> str:
    """Print ``value`` as pretty JSON with sorted keys and return the text."""
    text = json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
    print(text)
    return text


@dataclass
class SelectionSourceSummary:
    offered_mimes: list[str] = field(default_factory=list)
    serial_used: Optional[int] = None
    selection_set: bool = False
    send_count: int = 0
    bytes_written: int = 0
    error: Optional[str] = None

    def stage(self) -> str:
        if self.error is not None:
            return "error"
        if self.send_count > 0:
            return "payload_sent"
        if self.selection_set:
            return "selection_set"
        if self.serial_used is not None:
            return "focus_observed"
        return "waiting_for_focus"

    def to_json(self, mode: str, mime: str) -> dict[str, Any]:
        return {
            "mode": mode,
            "mime": mime,
            "offered_mimes": list(self.offered_mimes),
            "focus_observed": self.serial_used is not None,
            "selection_set": self.selection_set,
            "serial_used": self.serial_used,
            "send_count": self.send_count,
            "bytes_written": self.bytes_written,
            "success": self.error is None and self.send_count > 0,
            "stage": self.stage(),
            "error": self.error,
        }


@dataclass
class SelectionSinkSummary:
    received_mimes: list[str] = field(default_factory=list)
    offer_received: bool = False
    receive_requested: bool = False
    payload_read_finished: bool = False
    chosen_mime: Optional[str] = None
    payload: Optional[bytes] = None
    error: Optional[str] = None

    def stage(self) -> str:
        if self.error is not None:
            return "error"
        if self.payload_read_finished:
            return "payload_read_finished"
        if self.receive_requested:
            return "receive_requested"
        if self.offer_received:
            return "offer_received"
        return "waiting_for_offer"

    def to_json(self, mode: str, mime: str) -> dict[str, Any]:
        return {
            "mode": mode,
            "mime": mime,
            "received_mimes": list(self.received_mimes),
            "offer_received": self.offer_received,
            "receive_requested": self.receive_requested,
            "payload_read_finished": self.payload_read_finished,
            "chosen_mime": self.chosen_mime,
            "payload": payload_string(self.payload),
            "payload_len": _payload_len(self.payload),
            "success": self.error is None and self.payload is not None,
            "stage": self.stage(),
            "error": self.error,
        }


@dataclass
class DndSourceSummary:
    offered_mimes: list[str] = field(default_factory=list)
    pointer_serial_obtained: bool = False
    start_drag_attempted: bool = False
    send_count: int = 0
    bytes_written: int = 0
    blocked_reason: Optional[str] = None
    error: Optional[str] = None

    def stage(self) -> str:
        if self.error is not None:
            return "error"
        if self.send_count > 0:
            return "payload_sent"
        if self.start_drag_attempted:
            return "drag_started"
        if self.pointer_serial_obtained:
            return "pointer_serial_obtained"
        return "waiting_for_pointer_button"

    def to_json(self, mode: str, mime: str) -> dict[str, Any]:
        return {
            "mode": mode,
            "mime": mime,
            "offered_mimes": list(self.offered_mimes),
            "pointer_serial_obtained": self.pointer_serial_obtained,
            "start_drag_attempted": self.start_drag_attempted,
            "send_count": self.send_count,
            "bytes_written": self.bytes_written,
            "blocked_reason": self.blocked_reason,
            "success": self.start_drag_attempted and self.send_count > 0 and self.error is None,
            "stage": self.stage(),
            "error": self.error,
        }


@dataclass
class DndTargetSummary:
    enter_received: bool = False
    offered_mimes: list[str] = field(default_factory=list)
    offer_received: bool = False
    receive_requested: bool = False
    payload_read_finished: bool = False
    chosen_mime: Optional[str] = None
    drop_received: bool = False
    payload: Optional[bytes] = None
    error: Optional[str] = None

    def stage(self) -> str:
        if self.error is not None:
            return "error"
        if self.payload_read_finished:
            return "payload_read_finished"
        if self.receive_requested:
            return "receive_requested"
        if self.offer_received:
            return "offer_received"
        if self.enter_received:
            return "enter_received"
        return "waiting_for_enter"

    def to_json(self, mode: str, mime: str) -> dict[str, Any]:
        return {
            "mode": mode,
            "mime": mime,
            "enter_received": self.enter_received,
            "offered_mimes": list(self.offered_mimes),
            "offer_received": self.offer_received,
            "receive_requested": self.receive_requested,
            "payload_read_finished": self.payload_read_finished,
            "chosen_mime": self.chosen_mime,
            "drop_received": self.drop_received,
            "payload": payload_string(self.payload),
            "payload_len": _payload_len(self.payload),
            "success": (
                self.enter_received
                and self.drop_received
                and self.payload is not None
                and self.error is None
            ),
            "stage": self.stage(),
            "error": self.error,
        }