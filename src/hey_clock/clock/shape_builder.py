"""Builds the shapes of one clock face from the dial geometry and hand angles."""

import math
from dataclasses import dataclass

from .angles import Angle, HandAngles
from .geometry import DialGeometry
from .render_context import Color
from .shapes import Circle, Glyph, Polygon, capsule_points, rectangle_points, rotate_point


@dataclass(frozen=True)
class HandSpec:
    """Size, rotation and color of one hand."""

    length: float
    width: float
    angle: Angle
    color: Color


@dataclass(frozen=True)
class HandShapes:
    """Filled parts of a hand, back to front."""

    spec: HandSpec
    parts: tuple[Polygon, ...]


@dataclass(frozen=True)
class ClockFace:
    """All shapes of one frame, authored around the hub."""

    outer_ring: Circle
    numerals: tuple[Glyph, ...]
    minute_hand: HandShapes
    hour_hand: HandShapes
    inner_ring: Circle
    second_hand: HandShapes
    cutout: Circle


class ShapeBuilder:
    """Pure geometry for the dial, numerals and hands."""

    def __init__(self, geometry: DialGeometry):
        self.geometry = geometry

    def outer_ring(self) -> Circle:
        return Circle((0.0, 0.0), self.geometry.outer_ring_radius)

    def numerals(self) -> tuple[Glyph, ...]:
        """Hour numerals 1..12, rotated into place around the hub."""
        g = self.geometry
        return tuple(
            Glyph(
                str(number),
                rotate_point((0.0, -g.numeral_offset), number * math.pi / 6),
                g.numeral_size,
            )
            for number in range(1, 13)
        )

    def hand_specs(
        self, angles: HandAngles, primary_color: Color, accent_color: Color
    ) -> tuple[HandSpec, HandSpec, HandSpec]:
        """Return (hour, minute, second) hand specs."""
        g = self.geometry
        return (
            HandSpec(g.hour_length, g.hand_width, angles.hour, primary_color),
            HandSpec(g.minute_length, g.hand_width, angles.minute, primary_color),
            HandSpec(g.second_length, g.second_width, angles.second, accent_color),
        )

    def stalk_hand(self, spec: HandSpec) -> HandShapes:
        """
        Thin rectangular stalk plus a wider capsule head further out.

        Both parts are authored pointing down from the hub and rotated
        around it, so a half turn points the hand at 12.
        """
        radians = spec.angle.radians
        stalk = rectangle_points(-spec.width / 2, 0.0, spec.width, spec.length)
        head = capsule_points(-spec.width, self.geometry.head_offset, spec.width * 2, spec.length)
        return HandShapes(spec, (stalk.rotated(radians), head.rotated(radians)))

    def capsule_hand(self, spec: HandSpec) -> HandShapes:
        """Single capsule starting behind the hub."""
        capsule = capsule_points(
            -spec.width / 2, self.geometry.second_offset, spec.width, spec.length
        )
        return HandShapes(spec, (capsule.rotated(spec.angle.radians),))

    def inner_ring(self) -> Circle:
        return Circle((0.0, 0.0), self.geometry.inner_ring_radius)

    def cutout(self) -> Circle:
        """Hub disc inside the inner ring, inset by the ring stroke width."""
        return Circle((0.0, 0.0), self.geometry.cutout_radius)

    def build(self, angles: HandAngles, primary_color: Color, accent_color: Color) -> ClockFace:
        hour, minute, second = self.hand_specs(angles, primary_color, accent_color)
        return ClockFace(
            outer_ring=self.outer_ring(),
            numerals=self.numerals(),
            minute_hand=self.stalk_hand(minute),
            hour_hand=self.stalk_hand(hour),
            inner_ring=self.inner_ring(),
            second_hand=self.capsule_hand(second),
            cutout=self.cutout(),
        )
