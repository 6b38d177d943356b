# tests/test_spaces.py
"""
Coordinate-space value types: arithmetic stays inside one space, conversions
to/from pygame are explicit, and values are immutable.
"""
import dataclasses

import pygame
import pytest

from scenecam.core.spaces import ScenePoint, SceneVector, ScreenPoint, ScreenRect, ScreenVector


def test_point_vector_arithmetic_within_scene_space():
    p = ScenePoint(1, 2)
    v = SceneVector(3, -1)
    assert p + v == ScenePoint(4, 1)
    assert p - v == ScenePoint(-2, 3)
    assert ScenePoint(5, 5) - p == SceneVector(4, 3)
    assert v + v == SceneVector(6, -2)
    assert v - v == SceneVector(0, 0)
    assert v * 2 == SceneVector(6, -2)
    assert 2 * v == SceneVector(6, -2)
    assert v / 2 == SceneVector(1.5, -0.5)
    assert -v == SceneVector(-3, 1)


def test_components_are_floats():
    p = ScreenPoint(1, 2)
    assert isinstance(p.x, float) and isinstance(p.y, float)
    assert p.as_tuple() == (1.0, 2.0)
    assert tuple(p) == (1.0, 2.0)


@pytest.mark.parametrize(
    "op",
    [
        lambda: ScenePoint(0, 0) + ScreenVector(1, 1),
        lambda: ScreenPoint(0, 0) + SceneVector(1, 1),
        lambda: ScenePoint(0, 0) - ScreenPoint(1, 1),
        lambda: SceneVector(1, 1) + ScreenVector(1, 1),
        lambda: ScenePoint(0, 0) + ScenePoint(1, 1),
        lambda: SceneVector(1, 1) * SceneVector(1, 1),
        lambda: SceneVector(1, 1) * True,
        lambda: ScenePoint.from_vector2(ScreenPoint(300, 200)),
        lambda: ScreenVector.from_vector2(SceneVector(1, 1)),
        lambda: ScenePoint.from_vector2(SceneVector(1, 1)),
        lambda: ScenePoint.from_vector2(ScreenRect(0, 0, 10, 10)),
    ],
)
def test_mixing_spaces_is_a_type_error(op):
    with pytest.raises(TypeError):
        op()


def test_same_coordinates_in_different_spaces_are_not_equal():
    assert ScenePoint(1, 2) != ScreenPoint(1, 2)
    assert SceneVector(1, 2) != ScenePoint(1, 2)
    assert len({ScenePoint(1, 2), ScenePoint(1.0, 2.0), ScreenPoint(1, 2)}) == 2


def test_values_are_frozen():
    p = ScenePoint(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5  # type: ignore[misc]


def test_vector2_conversion_is_explicit_and_copies():
    v = pygame.Vector2(3, 4)
    p = ScenePoint.from_vector2(v)
    assert p == ScenePoint(3, 4)
    out = p.to_vector2()
    assert isinstance(out, pygame.Vector2)
    out.x = 100
    assert p.x == 3.0
    assert SceneVector(3, 4).length() == pytest.approx(5.0)


def test_screen_rect_from_pygame_rect_keeps_fractional_center():
    r = ScreenRect.from_rect(pygame.Rect(0, 0, 401, 301))
    assert r.center == ScreenPoint(200.5, 150.5)
    assert r.top_left == ScreenPoint(0, 0)
    assert r.bottom_right == ScreenPoint(401, 301)
    assert r.size == ScreenVector(401, 301)
    assert r.to_rect() == pygame.Rect(0, 0, 401, 301)


def test_screen_rect_corners_and_inflate():
    r = ScreenRect.from_corners(ScreenPoint(10, 20), ScreenPoint(110, 70))
    assert r == ScreenRect(10, 20, 100, 50)
    assert r.inflate(5) == ScreenRect(5, 15, 110, 60)
    assert r.inflate(5).center == r.center


def test_from_vector2_accepts_same_space_value():
    p = ScenePoint(3, 4)
    assert ScenePoint.from_vector2(p) == p


@pytest.mark.parametrize(
    "make",
    [
        lambda: ScenePoint("3", 4),
        lambda: ScreenVector(1, None),
        lambda: SceneVector(True, 0),
        lambda: ScreenRect(0, 0, "10", 10),
    ],
)
def test_non_numeric_components_rejected(make):
    with pytest.raises(TypeError):
        make()
