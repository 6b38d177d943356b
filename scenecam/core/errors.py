# scenecam/core/errors.py
"""Usage-contract violations raised at the camera's domain boundary."""

from __future__ import annotations


class CameraError(ValueError):
    """Base class for rejected camera inputs."""


class InvalidZoom(CameraError):
    """Zoom level was zero, negative or not finite."""

    def __init__(self, zoom_level: object) -> None:
        self.zoom_level = zoom_level
        super().__init__(f"zoom level must be a positive finite number, got {zoom_level!r}")


class DegenerateZoomSpace(CameraError):
    """ZoomSpace w-coordinate that does not correspond to a finite positive zoom."""

    def __init__(self, w: object) -> None:
        self.w = w
        super().__init__(f"ZoomSpace w must be a positive finite number, got {w!r}")


__all__ = ["CameraError", "InvalidZoom", "DegenerateZoomSpace"]
