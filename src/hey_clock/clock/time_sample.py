"""Per-frame wall-clock sample."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TimeSample:
    """Calendar fields of a single frame's timestamp."""

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    @classmethod
    def from_datetime(cls, value: Any) -> "TimeSample":
        """
        Build a sample from a ``datetime``/``time`` (or any object with the same fields).

        Missing or ``None`` fields default to zero instead of failing the frame.

        Args:
            value: Host timestamp in local time

        Returns:
            TimeSample for the timestamp
        """
        microsecond = _field(value, "microsecond")
        return cls(
            hour=_field(value, "hour"),
            minute=_field(value, "minute"),
            second=_field(value, "second"),
            nanosecond=microsecond * 1000,
        )


def _field(value: Any, name: str) -> int:
    field = getattr(value, name, None)
    return int(field) if field is not None else 0
