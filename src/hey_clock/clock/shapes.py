"""Primitive shapes in dial coordinates (origin at the hub, y pointing down)."""

import math
from dataclasses import dataclass

from ..constants import CAPSULE_CAP_SEGMENTS

Point = tuple[float, float]


def rotate_point(point: Point, radians: float, anchor: Point = (0.0, 0.0)) -> Point:
    """
    Rotate a point around ``anchor``.

    With y pointing down, positive angles turn clockwise on screen, so a
    vector pointing down rotated by a half turn points up.
    """
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    x = point[0] - anchor[0]
    y = point[1] - anchor[1]
    return (
        anchor[0] + x * cos_a - y * sin_a,
        anchor[1] + x * sin_a + y * cos_a,
    )


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def translated(self, dx: float, dy: float) -> "Circle":
        return Circle((self.center[0] + dx, self.center[1] + dy), self.radius)

    def bounding_box(self) -> tuple[float, float, float, float]:
        cx, cy = self.center
        return (cx - self.radius, cy - self.radius, cx + self.radius, cy + self.radius)


@dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...]

    def rotated(self, radians: float, anchor: Point = (0.0, 0.0)) -> "Polygon":
        return Polygon(tuple(rotate_point(p, radians, anchor) for p in self.points))


@dataclass(frozen=True)
class Glyph:
    """Text centered on ``position``."""

    text: str
    position: Point
    size: float


Shape = Circle | Polygon


def rectangle_points(x: float, y: float, width: float, height: float) -> Polygon:
    return Polygon(((x, y), (x + width, y), (x + width, y + height), (x, y + height)))


def capsule_points(
    x: float,
    y: float,
    width: float,
    height: float,
    segments: int = CAPSULE_CAP_SEGMENTS,
) -> Polygon:
    """
    Flatten a capsule (fully rounded rectangle) into a polygon.

    The caps sit on the short sides; each is sampled with ``segments`` steps.
    """
    cap = min(width, height) / 2
    if height >= width:
        cx = x + width / 2
        caps = [((cx, y + cap), math.pi), ((cx, y + height - cap), 0.0)]
    else:
        cy = y + height / 2
        caps = [((x + width - cap, cy), -math.pi / 2), ((x + cap, cy), math.pi / 2)]

    points: list[Point] = []
    for (cap_x, cap_y), start in caps:
        for step in range(segments + 1):
            t = start + math.pi * step / segments
            points.append((cap_x + cap * math.cos(t), cap_y + cap * math.sin(t)))
    return Polygon(tuple(points))
