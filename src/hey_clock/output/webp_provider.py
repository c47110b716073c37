"""WebP output provider."""

from PIL import Image

from .base import PillowSequenceOutputProvider


class WebPOutputProvider(PillowSequenceOutputProvider):
    """Output provider for lossless animated WebP; keeps the hub cutout transparent."""

    @property
    def output_format(self) -> str:
        return "webp"

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        # WebP stores RGB or RGBA only; palette or grayscale frames are widened.
        if frame.mode in ("RGB", "RGBA"):
            return frame
        return frame.convert("RGBA" if "transparency" in frame.info else "RGB")

    @property
    def save_options(self) -> dict[str, object]:
        # "exact" keeps the RGB values under fully transparent pixels.
        return {"lossless": True, "exact": True, "method": 6}
