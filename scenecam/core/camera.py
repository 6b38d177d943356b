# scenecam/core/camera.py
"""
2D camera value: a scene-space origin plus an isotropic zoom.

- The origin is the scene point drawn at the *center* of whatever viewport
  rectangle the caller supplies; the camera itself never knows where on screen
  it is drawn, so every point mapping takes the viewport explicitly.
- zoom_level is screen units per scene unit and is always positive & finite.
- Every "mutator" returns a new Camera; instances are frozen and hashable.
- Anchored zoom (zoom under the cursor) is done as zoom-then-correct, reusing
  point_to_scene so it stays consistent with whatever the mapping does.
- Batch transforms over numpy (N, 2) arrays for drawing many points at once.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any, Dict, Optional

import numpy as np

from scenecam.core.errors import InvalidZoom
from scenecam.core.spaces import (
    ScenePoint,
    SceneVector,
    ScreenPoint,
    ScreenRect,
    ScreenVector,
)
from scenecam.utils import settings

log = logging.getLogger(__name__)


def _validate_zoom(zoom_level: Any) -> float:
    if isinstance(zoom_level, bool) or not isinstance(zoom_level, Real):
        log.debug("Rejected non-numeric zoom %r", zoom_level)
        raise InvalidZoom(zoom_level)
    z = float(zoom_level)
    if not math.isfinite(z) or z <= 0.0:
        log.debug("Rejected zoom %r", zoom_level)
        raise InvalidZoom(zoom_level)
    return z


def _require(value: Any, kind: type, what: str) -> None:
    if not isinstance(value, kind):
        raise TypeError(f"{what} must be a {kind.__name__}, got {type(value).__name__}")


def _as_points_array(points: Any) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of points, got shape {arr.shape}")
    return arr


@dataclass(frozen=True)
class Camera:
    """Immutable origin + zoom pair with pure scene <-> screen transforms."""

    origin: ScenePoint
    zoom_level: float

    def __post_init__(self) -> None:
        _require(self.origin, ScenePoint, "origin")
        object.__setattr__(self, "zoom_level", _validate_zoom(self.zoom_level))

    # -------------------------
    # Construction & accessors
    # -------------------------

    @classmethod
    def create(cls, origin: Optional[ScenePoint] = None,
               zoom_level: float = settings.DEFAULT_ZOOM) -> "Camera":
        """Build a camera; origin defaults to settings.DEFAULT_ORIGIN."""
        if origin is None:
            origin = ScenePoint.from_tuple(settings.DEFAULT_ORIGIN)
        return cls(origin, zoom_level)

    def get_origin(self) -> ScenePoint:
        return self.origin

    def get_zoom(self) -> float:
        return self.zoom_level

    # -------------------------
    # Direct mutators
    # -------------------------

    def set_origin(self, point: ScenePoint) -> "Camera":
        return replace(self, origin=point)

    def center_on(self, point: ScenePoint) -> "Camera":
        """Instantly center the camera on a scene position."""
        return self.set_origin(point)

    def set_zoom(self, zoom_level: float) -> "Camera":
        """
        Replace the zoom, keeping the origin. The view therefore zooms about the
        viewport center; use set_zoom_at_screen_point to zoom about a cursor.
        """
        return replace(self, zoom_level=zoom_level)

    def translate_by(self, scene_vector: SceneVector) -> "Camera":
        _require(scene_vector, SceneVector, "scene_vector")
        return replace(self, origin=self.origin + scene_vector)

    def translate_by_screen_vector(self, screen_vector: ScreenVector) -> "Camera":
        """Pan by a screen-space delta (e.g. a pointer drag), converted via 1/zoom."""
        return self.translate_by(self.vector_to_scene(screen_vector))

    # -------------------------
    # Anchored zoom
    # -------------------------

    def set_zoom_at_screen_point(self, zoom_level: float, screen_point: ScreenPoint,
                                 viewport: ScreenRect) -> "Camera":
        """
        Change zoom so the scene location under `screen_point` stays under it.

        Zooms about the origin first, then translates by however far the
        anchored scene point drifted.
        """
        before = self.point_to_scene(viewport, screen_point)
        zoomed = self.set_zoom(zoom_level)
        after = zoomed.point_to_scene(viewport, screen_point)
        correction = before - after
        log.debug("Anchored zoom %.4g -> %.4g at %s, correction %s",
                  self.zoom_level, zoomed.zoom_level, screen_point.as_tuple(), correction.as_tuple())
        return zoomed.translate_by(correction)

    def zoom_by(self, factor: float, screen_point: ScreenPoint, viewport: ScreenRect) -> "Camera":
        """Multiply zoom by `factor`, anchored at `screen_point`."""
        return self.set_zoom_at_screen_point(self.zoom_level * factor, screen_point, viewport)

    # -------------------------
    # Coordinate transforms
    # -------------------------

    def vector_to_screen(self, scene_vector: SceneVector) -> ScreenVector:
        _require(scene_vector, SceneVector, "scene_vector")
        return ScreenVector(scene_vector.x * self.zoom_level, scene_vector.y * self.zoom_level)

    def vector_to_scene(self, screen_vector: ScreenVector) -> SceneVector:
        _require(screen_vector, ScreenVector, "screen_vector")
        return SceneVector(screen_vector.x / self.zoom_level, screen_vector.y / self.zoom_level)

    def point_to_screen(self, viewport: ScreenRect, scene_point: ScenePoint) -> ScreenPoint:
        """Scene -> screen: offset from origin, scaled by zoom, placed at the viewport center."""
        _require(viewport, ScreenRect, "viewport")
        _require(scene_point, ScenePoint, "scene_point")
        return viewport.center + self.vector_to_screen(scene_point - self.origin)

    def point_to_scene(self, viewport: ScreenRect, screen_point: ScreenPoint) -> ScenePoint:
        """Screen -> scene: offset from viewport center, divided by zoom, added to origin."""
        _require(viewport, ScreenRect, "viewport")
        _require(screen_point, ScreenPoint, "screen_point")
        return self.origin + self.vector_to_scene(screen_point - viewport.center)

    def points_to_screen(self, viewport: ScreenRect, points: Any) -> np.ndarray:
        """Batch point_to_screen over an (N, 2) array-like of scene coordinates."""
        _require(viewport, ScreenRect, "viewport")
        arr = _as_points_array(points)
        center = np.array(viewport.center.as_tuple())
        return (arr - np.array(self.origin.as_tuple())) * self.zoom_level + center

    def points_to_scene(self, viewport: ScreenRect, points: Any) -> np.ndarray:
        """Batch point_to_scene over an (N, 2) array-like of screen coordinates."""
        _require(viewport, ScreenRect, "viewport")
        arr = _as_points_array(points)
        center = np.array(viewport.center.as_tuple())
        return (arr - center) / self.zoom_level + np.array(self.origin.as_tuple())

    # -------------------------
    # Persistence
    # -------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize camera state for save files or dev tools."""
        return {
            "origin": (self.origin.x, self.origin.y),
            "zoom": self.zoom_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Camera":
        """Restore from `to_dict` output; missing keys fall back to the defaults."""
        ox, oy = data.get("origin", settings.DEFAULT_ORIGIN)
        return cls(ScenePoint(ox, oy), data.get("zoom", settings.DEFAULT_ZOOM))


def create(origin: ScenePoint, zoom_level: float) -> Camera:
    return Camera(origin, zoom_level)


__all__ = ["Camera", "create"]
