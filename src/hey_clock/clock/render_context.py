"""Rendering configuration and theming."""

from dataclasses import dataclass, replace
from enum import Enum

from ..constants import (
    ACCENT_COLOR,
    DARK_BACKGROUND_COLOR,
    DARK_PRIMARY_COLOR,
    DEFAULT_SUPERSAMPLE,
    LIGHT_BACKGROUND_COLOR,
    LIGHT_PRIMARY_COLOR,
)

Color = tuple[int, ...]


class ColorScheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class RenderContext:
    """Colors and raster settings for a clock face."""

    primary_color: Color
    accent_color: Color = ACCENT_COLOR
    background_color: Color | None = None
    supersample: int = DEFAULT_SUPERSAMPLE

    @staticmethod
    def lightmode() -> "RenderContext":
        return RenderContext(
            primary_color=LIGHT_PRIMARY_COLOR,
            background_color=LIGHT_BACKGROUND_COLOR,
        )

    @staticmethod
    def darkmode() -> "RenderContext":
        return RenderContext(
            primary_color=DARK_PRIMARY_COLOR,
            background_color=DARK_BACKGROUND_COLOR,
        )

    @classmethod
    def for_scheme(cls, scheme: "ColorScheme | str") -> "RenderContext":
        """
        Resolve the host color scheme to a context.

        Raises:
            ValueError: If the scheme name is unknown
        """
        scheme = ColorScheme(scheme)
        if scheme is ColorScheme.DARK:
            return cls.darkmode()
        return cls.lightmode()

    def transparent(self) -> "RenderContext":
        """Same colors, but leave the background (and the hub cutout) see-through."""
        return replace(self, background_color=None)
