# scenecam/core/zoom_space.py
"""
ZoomSpace: the (x, y, w = 1/zoom) reparameterization used for animation.

Zoom behaves like an inverse camera height above the scene plane, so lerping
(x, y, zoom) directly makes pan and zoom feel decoupled. Lerping (x, y, w)
instead moves the camera along a straight line in 3D, which reads as one
smooth dolly. None of this holds time: an external scheduler feeds progress
values into interpolate_from / transition once per frame.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator

from scenecam.core.camera import Camera
from scenecam.core.errors import DegenerateZoomSpace
from scenecam.core.spaces import ScenePoint

Easing = Callable[[float], float]


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


# ---------------------------------------------------------------------
# Easing
# ---------------------------------------------------------------------
def linear(t: float) -> float:
    return t


def smoothstep(t: float) -> float:
    t = _clamp(t, 0.0, 1.0)
    return t * t * (3 - 2 * t)


@dataclass(frozen=True)
class ZoomSpacePoint:
    """Camera origin (x, y) in scene units plus w = 1/zoom."""

    x: float
    y: float
    w: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.w

    def lerp(self, other: "ZoomSpacePoint", t: float) -> "ZoomSpacePoint":
        """Per-coordinate linear interpolation; t outside [0, 1] extrapolates."""
        return ZoomSpacePoint(
            self.x + t * (other.x - self.x),
            self.y + t * (other.y - self.y),
            self.w + t * (other.w - self.w),
        )

    def to_camera(self) -> Camera:
        return from_zoom_space(self.x, self.y, self.w)


def to_zoom_space(camera: Camera) -> ZoomSpacePoint:
    return ZoomSpacePoint(camera.origin.x, camera.origin.y, 1.0 / camera.zoom_level)


def from_zoom_space(x: float, y: float, w: float) -> Camera:
    """Rebuild a camera from ZoomSpace coordinates. w must be positive & finite."""
    w = float(w)
    if not math.isfinite(w) or w <= 0.0:
        raise DegenerateZoomSpace(w)
    return Camera(ScenePoint(x, y), 1.0 / w)


def interpolate_from(camera_a: Camera, camera_b: Camera, t: float) -> Camera:
    """
    Camera a fraction `t` of the way from camera_a to camera_b, lerped in
    ZoomSpace. Exactly t == 0 / t == 1 hand back the endpoint cameras untouched.
    """
    if t == 0:
        return camera_a
    if t == 1:
        return camera_b
    return to_zoom_space(camera_a).lerp(to_zoom_space(camera_b), t).to_camera()


def transition(camera_a: Camera, camera_b: Camera, progress: float,
               ease: Easing = smoothstep) -> Camera:
    """Eased interpolate_from; progress is clamped to [0, 1] first."""
    t = ease(_clamp(float(progress), 0.0, 1.0))
    return interpolate_from(camera_a, camera_b, t)


__all__ = [
    "ZoomSpacePoint",
    "to_zoom_space",
    "from_zoom_space",
    "interpolate_from",
    "transition",
    "linear",
    "smoothstep",
]
