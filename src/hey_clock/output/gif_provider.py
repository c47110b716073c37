"""GIF output provider."""

from PIL import Image

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    """Output provider for GIF format."""

    @property
    def output_format(self) -> str:
        return "gif"

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        # Opaque frames get their own palette; RGBA frames are left to
        # Pillow so the hub cutout keeps its transparency index.
        if frame.mode == "RGB":
            return frame.convert("P", palette=Image.Palette.ADAPTIVE)
        return frame

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 2}
