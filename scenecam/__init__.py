"""
scenecam: a 2D scene/screen camera.

Top-level re-exports so callers can write `from scenecam import Camera`.
"""
from scenecam.core.camera import Camera, create
from scenecam.core.errors import CameraError, DegenerateZoomSpace, InvalidZoom
from scenecam.core.spaces import ScenePoint, SceneVector, ScreenPoint, ScreenRect, ScreenVector
from scenecam.core.viewbox import ViewBox, view_box_for, view_box_for_focus
from scenecam.core.zoom_space import (
    ZoomSpacePoint,
    from_zoom_space,
    interpolate_from,
    to_zoom_space,
    transition,
)

__all__ = [
    "Camera",
    "create",
    "CameraError",
    "DegenerateZoomSpace",
    "InvalidZoom",
    "ScenePoint",
    "SceneVector",
    "ScreenPoint",
    "ScreenRect",
    "ScreenVector",
    "ViewBox",
    "view_box_for",
    "view_box_for_focus",
    "ZoomSpacePoint",
    "from_zoom_space",
    "interpolate_from",
    "to_zoom_space",
    "transition",
]
