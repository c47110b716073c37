"""Time-to-angle conversion for the clock hands."""

import math
from dataclasses import dataclass

from ..constants import (
    HALF_TURN_SENTINEL,
    HOUR_DEGREES,
    MINUTE_DEGREES,
    REFERENCE_OFFSET_DEGREES,
)
from .time_sample import TimeSample


@dataclass(frozen=True)
class Angle:
    """A concrete rotation, stored in radians."""

    radians: float

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(math.radians(degrees))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @property
    def normalized_degrees(self) -> float:
        """Rotation folded into ``[0, 360)``, rounded to absorb radian round-off."""
        return round(self.degrees, 9) % 360


@dataclass(frozen=True)
class HandAngles:
    hour: Angle
    minute: Angle
    second: Angle


def raw_angle_degrees(time: TimeSample) -> tuple[float, float, float]:
    """Return uncorrected (hour, minute, second) angles in degrees."""
    h = float(time.hour)
    m = float(time.minute)
    s = float(time.second)
    n = float(time.nanosecond)
    hour = HOUR_DEGREES * (h + m / 60) + REFERENCE_OFFSET_DEGREES
    minute = MINUTE_DEGREES * (m + s / 60) + REFERENCE_OFFSET_DEGREES
    second = MINUTE_DEGREES * (s + n / 1_000_000_000) + REFERENCE_OFFSET_DEGREES
    return hour, minute, second


def correct_half_turn(angle: Angle) -> Angle:
    """
    Replace an exact half-turn with a near-pi sentinel.

    Some rotation backends mis-render a rotation of exactly pi; the sentinel
    is visually identical. Only a bit-exact ``math.pi`` is replaced.
    """
    if angle.radians == math.pi:
        return Angle(HALF_TURN_SENTINEL)
    return angle


def compute_angles(time: TimeSample) -> HandAngles:
    """Convert a time sample into hour, minute and second hand rotations."""
    hour, minute, second = raw_angle_degrees(time)
    return HandAngles(
        hour=correct_half_turn(Angle.from_degrees(hour)),
        minute=correct_half_turn(Angle.from_degrees(minute)),
        second=correct_half_turn(Angle.from_degrees(second)),
    )
