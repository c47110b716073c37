"""Dial proportions derived from a single radius."""

from dataclasses import dataclass

from ..constants import (
    BORDER_RATIO,
    HAND_HEAD_OFFSET_RATIO,
    HAND_WIDTH_RATIO,
    HOUR_LENGTH_RATIO,
    INNER_RING_RATIO,
    MINUTE_LENGTH_RATIO,
    NUMERAL_OFFSET_RATIO,
    NUMERAL_SIZE_RATIO,
    RING_WIDTH_RATIO,
    SECOND_LENGTH_RATIO,
    SECOND_OFFSET_RATIO,
    SECOND_WIDTH_RATIO,
)


def radius_for_size(width: float, height: float) -> float:
    """Largest dial radius that fits the surface; never negative."""
    return max(min(width, height) / 2, 0.0)


@dataclass(frozen=True)
class DialGeometry:
    """Every size on the dial, scaled from ``radius``."""

    radius: float
    border_width: float
    inner_ring_diameter: float
    ring_width: float
    numeral_size: float
    numeral_offset: float
    hand_width: float
    hour_length: float
    minute_length: float
    head_offset: float
    second_length: float
    second_width: float
    second_offset: float

    @classmethod
    def from_radius(cls, radius: float) -> "DialGeometry":
        return cls(
            radius=radius,
            border_width=radius * BORDER_RATIO,
            inner_ring_diameter=radius * INNER_RING_RATIO,
            ring_width=radius * RING_WIDTH_RATIO,
            numeral_size=radius * NUMERAL_SIZE_RATIO,
            numeral_offset=radius * NUMERAL_OFFSET_RATIO,
            hand_width=radius * HAND_WIDTH_RATIO,
            hour_length=radius * HOUR_LENGTH_RATIO,
            minute_length=radius * MINUTE_LENGTH_RATIO,
            head_offset=radius * HAND_HEAD_OFFSET_RATIO,
            second_length=radius * SECOND_LENGTH_RATIO,
            second_width=radius * SECOND_WIDTH_RATIO,
            second_offset=radius * SECOND_OFFSET_RATIO,
        )

    @classmethod
    def for_surface(cls, width: float, height: float) -> "DialGeometry":
        return cls.from_radius(radius_for_size(width, height))

    @property
    def is_degenerate(self) -> bool:
        """True when there is nothing visible to draw."""
        return self.radius <= 0

    @property
    def outer_ring_radius(self) -> float:
        """Outer ring centerline, inset so the stroke stays inside the surface."""
        return self.radius - self.border_width / 2

    @property
    def inner_ring_radius(self) -> float:
        return self.inner_ring_diameter / 2

    @property
    def cutout_radius(self) -> float:
        return self.inner_ring_radius - self.ring_width
