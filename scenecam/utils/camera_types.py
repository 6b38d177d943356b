"""
Lightweight camera type hints and helpers.

- Structural protocols for the geometry the camera interoperates with, so any
  object exposing .x/.y (pygame.Vector2, ScenePoint, ...) or x/y/width/height
  (pygame.Rect, ScreenRect, ...) is accepted at the conversion boundary.
- Provides a `CameraLike` Protocol for helpers that only need the mapping API.
- Includes data-driven zoom steps plus `snap_zoom` and `clamp_zoom` helpers.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Protocol, Sequence, TYPE_CHECKING

from scenecam.utils import settings

if TYPE_CHECKING:  # pragma: no cover
    from scenecam.core.spaces import (
        ScenePoint, SceneVector, ScreenPoint, ScreenRect, ScreenVector,
    )

# ---- Zoom helpers -----------------------------------------------------------

DEFAULT_ZOOM_STEPS: Sequence[float] = settings.ZOOM_STEPS


def snap_zoom(z: float, steps: Sequence[float] = DEFAULT_ZOOM_STEPS) -> float:
    """
    Snap an arbitrary zoom value to the nearest allowed step.

    Example:
        snap_zoom(0.92) -> 1.0
        snap_zoom(1.38) -> 1.25 or 1.5 (nearest)

    Args:
        z: Current zoom.
        steps: Allowed zoom steps (must be sorted ascending, non-empty).

    Returns:
        Nearest value from `steps`.
    """
    if not steps:
        raise ValueError("steps must not be empty")
    i = bisect_left(steps, z)
    if i == 0:
        return steps[0]
    if i == len(steps):
        return steps[-1]
    after = steps[i]
    before = steps[i - 1]
    return after if abs(after - z) < abs(z - before) else before


def clamp_zoom(z: float, lo: float = settings.MIN_ZOOM, hi: float = settings.MAX_ZOOM) -> float:
    """Clamp a zoom value into [lo, hi]."""
    if lo > hi:
        raise ValueError("lo must be <= hi")
    return max(lo, min(hi, z))


# ---- Geometry protocols -----------------------------------------------------

class PointLike(Protocol):
    x: float
    y: float


class RectLike(Protocol):
    x: float
    y: float
    width: float
    height: float


# ---- Camera protocol --------------------------------------------------------

class CameraLike(Protocol):
    """
    Minimal requirements for objects treated as a camera by the helpers.
    Any class implementing these attributes/methods will satisfy the protocol.
    """

    origin: "ScenePoint"
    zoom_level: float

    def point_to_screen(self, viewport: "ScreenRect", scene_point: "ScenePoint") -> "ScreenPoint": ...
    def point_to_scene(self, viewport: "ScreenRect", screen_point: "ScreenPoint") -> "ScenePoint": ...
    def vector_to_screen(self, scene_vector: "SceneVector") -> "ScreenVector": ...
    def vector_to_scene(self, screen_vector: "ScreenVector") -> "SceneVector": ...


__all__ = [
    "CameraLike",
    "PointLike",
    "RectLike",
    "DEFAULT_ZOOM_STEPS",
    "snap_zoom",
    "clamp_zoom",
]
