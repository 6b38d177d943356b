# scenecam/core/viewbox.py
"""
Scene-space rectangle a viewport currently shows, for an SVG `viewBox`.

Computed in full float precision; rounding to ints only happens when the
value is formatted for the render surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from scenecam.core.camera import Camera
from scenecam.core.spaces import ScreenRect


@dataclass(frozen=True)
class ViewBox:
    x: float
    y: float
    width: float
    height: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.width
        yield self.height

    def rounded(self) -> Tuple[int, int, int, int]:
        """Nearest ints; exact .5 ties go to the even neighbour (Python's round)."""
        return (int(round(self.x)), int(round(self.y)),
                int(round(self.width)), int(round(self.height)))

    def to_attribute(self) -> str:
        """Format as an SVG viewBox attribute value, e.g. "-200 -200 400 400"."""
        return " ".join(str(v) for v in self.rounded())


def view_box_for_focus(camera: Camera, focus: ScreenRect, render: ScreenRect) -> ViewBox:
    """
    Visible scene rectangle when the camera is centered on `focus` but the
    drawing surface is `render` (which may be larger, e.g. to leave room for
    UI chrome that does not pan or zoom).
    """
    top_left = camera.point_to_scene(focus, render.top_left)
    size = camera.vector_to_scene(render.size)
    return ViewBox(top_left.x, top_left.y, size.x, size.y)


def view_box_for(camera: Camera, viewport: ScreenRect) -> ViewBox:
    return view_box_for_focus(camera, viewport, viewport)


__all__ = ["ViewBox", "view_box_for", "view_box_for_focus"]
