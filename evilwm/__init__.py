"""Infinite-canvas window manager pieces: geometry, camera, momentum, input policy, IPC helpers, event logs and transfer reports."""

__version__ = "0.1.0"