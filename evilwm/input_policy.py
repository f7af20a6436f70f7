"""Decisions the compositor makes about raw pointer, scroll, pinch and keyboard input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

# Wheel events report 120 discrete units per notch; one notch scrolls this many pixels.
SCROLL_PIXELS_PER_NOTCH = 15.0
V120_UNITS_PER_NOTCH = 120.0

DEFAULT_ZOOM_STEP = 1.2

_MIN_PINCH_SCALE = 0.0001


@dataclass(frozen=True)
class ModifierSet:
    """Which keyboard modifiers are held; ``logo`` is the Super key."""

    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    logo: bool = False


def modifier_set_json(modifiers: ModifierSet) -> dict[str, Any]:
    """The modifier state as it appears in event log entries."""
    return {
        "ctrl": modifiers.ctrl,
        "alt": modifiers.alt,
        "shift": modifiers.shift,
        "super": modifiers.logo,
    }


def pinch_relative_factor(
    previous_scale: Optional[float], absolute_scale: float
) -> tuple[float, Optional[float]]:
    """Turn a pinch gesture's absolute scale into a step relative to the last one.

    Returns the scale to remember for the next update and the relative factor,
    which is None when there was no previous scale. Scales are floored at a small
    positive value so the ratio stays finite.
    """
    clamped = max(absolute_scale, _MIN_PINCH_SCALE)
    if previous_scale is None:
        return clamped, None
    return clamped, clamped / max(previous_scale, _MIN_PINCH_SCALE)


def should_apply_pointer_focus_fallback(
    resolve_focus_handled: bool, resolve_focus_hook_installed: bool
) -> bool:
    """Click-to-focus applies only when no focus hook is installed and none handled the click."""
    return not resolve_focus_handled and not resolve_focus_hook_installed


def scroll_amount(amount: Optional[float], amount_v120: Optional[float]) -> float:
    """Scroll distance in pixels on one axis.

    A continuous amount is used as is; otherwise the discrete v120 value is
    converted at a fixed number of pixels per wheel notch.
    """
    if amount is not None:
        return amount
    discrete = amount_v120 if amount_v120 is not None else 0.0
    return discrete * SCROLL_PIXELS_PER_NOTCH / V120_UNITS_PER_NOTCH


def pointer_zoom_factor(
    zoom_delta: float, zoom_step: float = DEFAULT_ZOOM_STEP
) -> Optional[float]:
    """Zoom factor for a modifier-held scroll: scrolling up zooms in, down zooms out.

    Returns None when the scroll does not move.
    """
    if zoom_delta == 0.0:
        return None
    if zoom_delta < 0.0:
        return zoom_step
    return 1.0 / zoom_step