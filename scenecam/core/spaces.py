# scenecam/core/spaces.py
"""
Coordinate-space tagged value types.

Scene space is where drawing content lives; screen space is the viewport it is
rendered into. Points and vectors of the two spaces are distinct classes so a
scene point can never be handed to something expecting a screen point:

- point + vector -> point, point - vector -> point, point - point -> vector
- vector +/- vector -> vector, vector * scalar, vector / scalar, -vector
- any operation mixing the two spaces raises TypeError

The only way across is through a Camera (point_to_screen / point_to_scene and
friends). Values are immutable and hashable; pygame's Vector2/Rect remain the
interchange types and convert explicitly via from_vector2 / to_vector2 /
from_rect / to_rect.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator, Tuple, Type, TYPE_CHECKING

import pygame

if TYPE_CHECKING:  # pragma: no cover
    from scenecam.utils.camera_types import PointLike, RectLike


def _component(owner: str, name: str, value: object) -> float:
    # bool is a Real; a True coordinate is almost certainly a bug
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{owner}.{name} must be a real number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class _Pair:
    """Two float components tagged with a coordinate space."""

    x: float
    y: float

    space: ClassVar[str] = ""

    def __post_init__(self) -> None:
        name = type(self).__name__
        object.__setattr__(self, "x", _component(name, "x", self.x))
        object.__setattr__(self, "y", _component(name, "y", self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_vector2(self) -> pygame.Vector2:
        """Unwrap into a fresh (mutable) pygame Vector2."""
        return pygame.Vector2(self.x, self.y)

    @classmethod
    def from_vector2(cls, v: "PointLike"):
        """
        Wrap anything with .x/.y (pygame.Vector2 included) into this space.
        Tagged values from another space are rejected; use a Camera to convert.
        """
        if isinstance(v, (_Pair, ScreenRect)) and type(v) is not cls:
            raise TypeError(f"cannot wrap {type(v).__name__} as {cls.__name__}")
        return cls(v.x, v.y)

    @classmethod
    def from_tuple(cls, xy: Tuple[float, float]):
        x, y = xy
        return cls(x, y)


class _Point(_Pair):
    vector_type: ClassVar[Type["_Vector"]]

    def __add__(self, other):
        if isinstance(other, self.vector_type):
            return type(self)(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, self.vector_type):
            return type(self)(self.x - other.x, self.y - other.y)
        if isinstance(other, type(self)):
            return self.vector_type(self.x - other.x, self.y - other.y)
        return NotImplemented


class _Vector(_Pair):
    def __add__(self, other):
        if isinstance(other, type(self)):
            return type(self)(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, type(self)):
            return type(self)(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, k):
        # bool is a Real; scaling by True/False is almost certainly a bug
        if isinstance(k, Real) and not isinstance(k, bool):
            return type(self)(self.x * k, self.y * k)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, k):
        if isinstance(k, Real) and not isinstance(k, bool):
            return type(self)(self.x / k, self.y / k)
        return NotImplemented

    def __neg__(self):
        return type(self)(-self.x, -self.y)

    def length(self) -> float:
        return self.to_vector2().length()


@dataclass(frozen=True)
class SceneVector(_Vector):
    """Free vector in scene units."""

    space: ClassVar[str] = "scene"


@dataclass(frozen=True)
class ScreenVector(_Vector):
    """Free vector in screen units (e.g. a pointer delta in pixels)."""

    space: ClassVar[str] = "screen"


@dataclass(frozen=True)
class ScenePoint(_Point):
    """Location in scene space."""

    space: ClassVar[str] = "scene"
    vector_type: ClassVar[Type[_Vector]] = SceneVector


@dataclass(frozen=True)
class ScreenPoint(_Point):
    """Location in screen space."""

    space: ClassVar[str] = "screen"
    vector_type: ClassVar[Type[_Vector]] = ScreenVector


@dataclass(frozen=True)
class ScreenRect:
    """
    Axis-aligned viewport rectangle in screen space, kept in floats.

    pygame.Rect is integer-only and its .center truncates, so the center here is
    computed from x + width / 2 instead.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, _component("ScreenRect", name, getattr(self, name)))

    @classmethod
    def from_rect(cls, rect: "RectLike") -> "ScreenRect":
        """Wrap a pygame.Rect (or anything exposing x/y/width/height)."""
        return cls(rect.x, rect.y, rect.width, rect.height)

    @classmethod
    def from_corners(cls, top_left: ScreenPoint, bottom_right: ScreenPoint) -> "ScreenRect":
        return cls(top_left.x, top_left.y,
                   bottom_right.x - top_left.x, bottom_right.y - top_left.y)

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(int(round(self.x)), int(round(self.y)),
                           int(round(self.width)), int(round(self.height)))

    @property
    def center(self) -> ScreenPoint:
        return ScreenPoint(self.x + self.width * 0.5, self.y + self.height * 0.5)

    @property
    def top_left(self) -> ScreenPoint:
        return ScreenPoint(self.x, self.y)

    @property
    def bottom_right(self) -> ScreenPoint:
        return ScreenPoint(self.x + self.width, self.y + self.height)

    @property
    def size(self) -> ScreenVector:
        return ScreenVector(self.width, self.height)

    def inflate(self, margin: float) -> "ScreenRect":
        """Grow (or shrink, for negative margin) by `margin` on every side."""
        return ScreenRect(self.x - margin, self.y - margin,
                          self.width + 2 * margin, self.height + 2 * margin)


__all__ = [
    "SceneVector",
    "ScreenVector",
    "ScenePoint",
    "ScreenPoint",
    "ScreenRect",
]
