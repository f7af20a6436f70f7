"""Exponentially decaying velocity used for inertial canvas panning."""

from __future__ import annotations

import math
import sys

from .geometry import Vec2

_EPSILON = sys.float_info.epsilon


class Momentum:
    """A velocity that decays with friction until it falls below a stop threshold."""

    def __init__(self, friction: float, stop_threshold: float) -> None:
        if friction < 0.0:
            raise ValueError("friction must be non-negative")
        if stop_threshold < 0.0:
            raise ValueError("stop_threshold must be non-negative")
        self.velocity = Vec2(0.0, 0.0)
        self.friction = friction
        self.stop_threshold = stop_threshold

    def __repr__(self) -> str:
        return (
            f"Momentum(velocity={self.velocity!r}, friction={self.friction!r}, "
            f"stop_threshold={self.stop_threshold!r})"
        )

    def is_stopped(self) -> bool:
        return self.velocity.length() <= self.stop_threshold

    def step(self, dt_seconds: float) -> Vec2:
        """Advance by ``dt_seconds`` and return the displacement travelled."""
        if dt_seconds < 0.0:
            raise ValueError("dt_seconds must be non-negative")

        if self.is_stopped():
            self.velocity = Vec2(0.0, 0.0)
            return self.velocity

        damping = math.exp(-self.friction * dt_seconds)
        if self.friction <= _EPSILON:
            displacement = self.velocity * dt_seconds
        else:
            displacement = self.velocity * ((1.0 - damping) / self.friction)

        self.velocity = self.velocity * damping
        if self.is_stopped():
            self.velocity = Vec2(0.0, 0.0)
        return displacement