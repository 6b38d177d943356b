# scenecam/utils/camera_utils.py
from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional, Sequence

import pygame

from scenecam.core.camera import Camera
from scenecam.core.spaces import ScenePoint, ScreenPoint, ScreenRect
from scenecam.utils import settings
from scenecam.utils.camera_types import CameraLike, RectLike, clamp_zoom, snap_zoom

_SAFE_MIN = -2_000_000_000
_SAFE_MAX = 2_000_000_000


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _require_scene_rect(rect: RectLike) -> None:
    # ScreenRect is the only rect type tagged with a space, and it is the wrong one
    if isinstance(rect, ScreenRect):
        raise TypeError("rect must be a scene-space rect (e.g. pygame.Rect), got ScreenRect")


# ---------------------------------------------------------------------------
# Visibility / culling
# ---------------------------------------------------------------------------

def visible_scene_rect(camera: CameraLike, viewport: ScreenRect, margin: float = 0.0) -> pygame.Rect:
    """
    Scene-space pygame.Rect covering everything visible in `viewport`, grown by
    `margin` screen units and rounded outward to whole scene units.
    """
    area = viewport.inflate(margin)
    x0, y0 = camera.point_to_scene(viewport, area.top_left)
    x1, y1 = camera.point_to_scene(viewport, area.bottom_right)
    left = math.floor(min(x0, x1))
    top = math.floor(min(y0, y1))
    return pygame.Rect(
        int(left),
        int(top),
        int(math.ceil(max(x0, x1)) - left),
        int(math.ceil(max(y0, y1)) - top),
    )


def cull_scene_points(
    camera: CameraLike,
    viewport: ScreenRect,
    points: Iterable[ScenePoint],
    *,
    margin: float = 0.0
) -> Iterator[ScenePoint]:
    """Yield only scene points that land inside the (margin-grown) viewport."""
    area = viewport.inflate(margin)
    lo = camera.point_to_scene(viewport, area.top_left)
    hi = camera.point_to_scene(viewport, area.bottom_right)
    for p in points:
        if not isinstance(p, ScenePoint):
            raise TypeError(f"points must be ScenePoint, got {type(p).__name__}")
        if lo.x <= p.x <= hi.x and lo.y <= p.y <= hi.y:
            yield p


# ---------------------------------------------------------------------------
# Rect mapping
# ---------------------------------------------------------------------------

def scene_rect_to_screen(camera: CameraLike, viewport: ScreenRect, rect: RectLike) -> pygame.Rect:
    """Transform a scene-space rect (e.g. a pygame.Rect of content) to a screen-space pygame.Rect."""
    _require_scene_rect(rect)
    tl = camera.point_to_screen(viewport, ScenePoint(rect.x, rect.y))
    w = rect.width * camera.zoom_level
    h = rect.height * camera.zoom_level
    # Clamp all values to the safe range before creating the Rect
    safe_x = _clamp(round(tl.x), _SAFE_MIN, _SAFE_MAX)
    safe_y = _clamp(round(tl.y), _SAFE_MIN, _SAFE_MAX)
    safe_w = _clamp(round(w), 0, _SAFE_MAX)     # Width/height can't be negative
    safe_h = _clamp(round(h), 0, _SAFE_MAX)
    return pygame.Rect(int(safe_x), int(safe_y), int(safe_w), int(safe_h))


# ---------------------------------------------------------------------------
# Framing / wheel zoom
# ---------------------------------------------------------------------------

def frame_scene_rect(
    camera: Camera,
    viewport: ScreenRect,
    rect: RectLike,
    *,
    margin_px: float = 0,
    steps: Optional[Sequence[float]] = None,
) -> Camera:
    """
    Center on `rect` (scene space) and pick the zoom that makes it fully visible
    with `margin_px` screen units to spare. If `steps` is given, snap to the
    nearest zoom step. Degenerate rects/viewports return the camera unchanged.
    """
    _require_scene_rect(rect)
    if rect.width <= 0 or rect.height <= 0 or viewport.width <= 0 or viewport.height <= 0:
        return camera
    usable_w = viewport.width - margin_px * 2
    usable_h = viewport.height - margin_px * 2
    if usable_w <= 0 or usable_h <= 0:
        return camera
    desired = min(usable_w / rect.width, usable_h / rect.height)
    if steps is not None:
        desired = snap_zoom(desired, steps)
    center = ScenePoint(rect.x + rect.width * 0.5, rect.y + rect.height * 0.5)
    return Camera(center, desired)


def wheel_zoom(
    camera: Camera,
    ticks: float,
    screen_point: ScreenPoint,
    viewport: ScreenRect,
    *,
    factor_per_tick: float = settings.WHEEL_ZOOM_FACTOR,
    lo: float = settings.MIN_ZOOM,
    hi: float = settings.MAX_ZOOM,
) -> Camera:
    """
    Mouse-wheel zoom under the cursor: multiply by factor_per_tick ** ticks,
    clamped to [lo, hi]. Zero ticks returns the camera unchanged.
    """
    if not ticks:
        return camera
    target = clamp_zoom(camera.zoom_level * factor_per_tick ** ticks, lo, hi)
    return camera.set_zoom_at_screen_point(target, screen_point, viewport)


__all__ = [
    "visible_scene_rect",
    "cull_scene_points",
    "scene_rect_to_screen",
    "frame_scene_rect",
    "wheel_zoom",
]
