"""Animated PNG output provider."""

from .base import PillowSequenceOutputProvider


class PngOutputProvider(PillowSequenceOutputProvider):
    """Output provider for animated PNG; keeps the alpha channel of transparent frames."""

    @property
    def output_format(self) -> str:
        return "png"

    @property
    def save_options(self) -> dict[str, object]:
        return {"disposal": 1, "blend": 0}
