"""A camera over the infinite canvas: pan, zoom and coordinate conversion."""

from __future__ import annotations

import copy
import math

from .geometry import Point, Rect, Size, Vec2


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Viewport:
    """Maps between screen coordinates and world coordinates on the canvas."""

    def __init__(self, screen_size: Size) -> None:
        self._world_origin = Point(0.0, 0.0)
        self.screen_size = screen_size
        self._zoom = 1.0
        self._min_zoom = 0.1
        self._max_zoom = 8.0

    @property
    def world_origin(self) -> Point:
        return self._world_origin

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def min_zoom(self) -> float:
        return self._min_zoom

    @property
    def max_zoom(self) -> float:
        return self._max_zoom

    def _state(self) -> tuple:
        return (
            self._world_origin,
            self.screen_size,
            self._zoom,
            self._min_zoom,
            self._max_zoom,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Viewport):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        return (
            f"Viewport(world_origin={self._world_origin!r}, screen_size={self.screen_size!r}, "
            f"zoom={self._zoom!r}, min_zoom={self._min_zoom!r}, max_zoom={self._max_zoom!r})"
        )

    def try_with_zoom_limits(self, min_zoom: float, max_zoom: float) -> Viewport:
        """Return a copy with new zoom limits, raising ValueError if they are invalid."""
        if not math.isfinite(min_zoom) or min_zoom <= 0.0:
            raise ValueError("min_zoom must be a positive finite number")
        if not math.isfinite(max_zoom) or max_zoom < min_zoom:
            raise ValueError("max_zoom must be a finite number >= min_zoom")
        result = copy.copy(self)
        result._min_zoom = min_zoom
        result._max_zoom = max_zoom
        result._zoom = _clamp(result._zoom, min_zoom, max_zoom)
        return result

    def with_zoom_limits(self, min_zoom: float, max_zoom: float) -> Viewport:
        """Return a copy with new zoom limits, or an unchanged copy if they are invalid."""
        try:
            return self.try_with_zoom_limits(min_zoom, max_zoom)
        except ValueError:
            return copy.copy(self)

    def screen_to_world(self, screen: Point) -> Point:
        return self._world_origin + Vec2(screen.x / self._zoom, screen.y / self._zoom)

    def world_to_screen(self, world: Point) -> Point:
        delta = world - self._world_origin
        return Point(delta.x * self._zoom, delta.y * self._zoom)

    def visible_world_rect(self) -> Rect:
        return Rect.from_xywh(
            self._world_origin.x,
            self._world_origin.y,
            self.screen_size.w / self._zoom,
            self.screen_size.h / self._zoom,
        )

    def pan_world(self, delta: Vec2) -> None:
        self._world_origin = self._world_origin + delta

    def pan_screen(self, delta: Vec2) -> None:
        """Move the content by a screen-space delta (the camera moves the opposite way)."""
        self._world_origin = self._world_origin - delta / self._zoom

    def center_on(self, world_point: Point) -> None:
        self._world_origin = Point(
            world_point.x - (self.screen_size.w / self._zoom) / 2.0,
            world_point.y - (self.screen_size.h / self._zoom) / 2.0,
        )

    def zoom_at_screen(self, anchor: Point, factor: float) -> None:
        """Zoom by ``factor`` keeping the world point under ``anchor`` fixed on screen."""
        if not math.isfinite(factor) or factor <= 0.0:
            return
        anchored_world = self.screen_to_world(anchor)
        self._zoom = _clamp(self._zoom * factor, self._min_zoom, self._max_zoom)
        self._world_origin = Point(
            anchored_world.x - anchor.x / self._zoom,
            anchored_world.y - anchor.y / self._zoom,
        )

    def fit_rect(self, rect: Rect, padding: float) -> None:
        """Zoom and pan so that ``rect`` plus ``padding`` fits and is centred."""
        padded_w = max(rect.size.w + padding * 2.0, 1.0)
        padded_h = max(rect.size.h + padding * 2.0, 1.0)
        zoom_x = self.screen_size.w / padded_w
        zoom_y = self.screen_size.h / padded_h
        self._zoom = _clamp(min(zoom_x, zoom_y), self._min_zoom, self._max_zoom)

        visible = self.visible_world_rect().size
        center = rect.center()
        self._world_origin = Point(center.x - visible.w / 2.0, center.y - visible.h / 2.0)