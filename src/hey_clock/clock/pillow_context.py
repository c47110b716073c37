"""Pillow raster backend for the drawing context."""

from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from .drawing_context import CompositeMode, DrawingContext
from .render_context import Color
from .shapes import Circle, Glyph, Point, Polygon, Shape

BOLD_FONT = "DejaVuSans-Bold.ttf"
TRANSPARENT = (0, 0, 0, 0)


@lru_cache(maxsize=32)
def load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load the bold numeral font, falling back to Pillow's bundled default at the same size."""
    try:
        return ImageFont.truetype(BOLD_FONT, size)
    except OSError:
        return ImageFont.load_default(size=size)


class PillowContext(DrawingContext):
    """Draws onto an RGBA image, optionally scaled up for supersampling."""

    def __init__(self, image: Image.Image, scale: float = 1.0):
        """
        Initialize the context.

        Args:
            image: RGBA target image
            scale: Factor from dial units to image pixels
        """
        super().__init__()
        if image.mode != "RGBA":
            raise ValueError(f"PillowContext needs an RGBA image, got {image.mode}")
        self.image = image
        self.scale = scale
        self.origin: Point = (0.0, 0.0)
        self.draw = ImageDraw.Draw(image, "RGBA")

    def translate(self, dx: float, dy: float) -> None:
        self.origin = (self.origin[0] + dx, self.origin[1] + dy)

    def stroke(self, shape: Shape, color: Color, line_width: float) -> None:
        width = max(1, round(line_width * self.scale))
        fill = self._paint(color)
        if isinstance(shape, Circle):
            # Pillow strokes inward from the bounding box; grow it so the
            # stroke is centered on the circle's edge.
            outer = Circle(shape.center, shape.radius + line_width / 2)
            if shape.radius <= line_width / 2:
                self.draw.ellipse(self._box(outer), fill=fill)
            else:
                self.draw.ellipse(self._box(outer), outline=fill, width=width)
        else:
            points = self._points(shape)
            self.draw.line([*points, points[0]], fill=fill, width=width, joint="curve")

    def fill(self, shape: Shape, color: Color) -> None:
        fill = self._paint(color)
        if isinstance(shape, Circle):
            self.draw.ellipse(self._box(shape), fill=fill)
        else:
            self.draw.polygon(self._points(shape), fill=fill)

    def draw_text(self, glyph: Glyph, color: Color) -> None:
        font = load_font(max(1, round(glyph.size * self.scale)))
        x, y = self._to_pixels(glyph.position)
        left, top, right, bottom = self.draw.textbbox((0, 0), glyph.text, font=font)
        self.draw.text(
            (x - (left + right) / 2, y - (top + bottom) / 2),
            glyph.text,
            font=font,
            fill=self._paint(color),
        )

    def _paint(self, color: Color) -> tuple[int, ...]:
        if self.mode is CompositeMode.CLEAR:
            return TRANSPARENT
        if len(color) == 3:
            return (*color, 255)
        return tuple(color)

    def _to_pixels(self, point: Point) -> Point:
        return (
            (point[0] + self.origin[0]) * self.scale,
            (point[1] + self.origin[1]) * self.scale,
        )

    def _box(self, circle: Circle) -> list[Point]:
        left, top, right, bottom = circle.bounding_box()
        return [self._to_pixels((left, top)), self._to_pixels((right, bottom))]

    def _points(self, polygon: Polygon) -> list[Point]:
        return [self._to_pixels(p) for p in polygon.points]
