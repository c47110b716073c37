"""Renderer for drawing clock frames using Pillow."""

from PIL import Image

from .angles import compute_angles
from .composer import FrameComposer
from .drawing_context import Frame, RecordingContext, replay_frame
from .geometry import DialGeometry
from .pillow_context import PillowContext
from .render_context import RenderContext
from .shape_builder import ShapeBuilder
from .time_sample import TimeSample


class ClockRenderer:
    """Renders time samples as clock faces for a fixed surface size."""

    def __init__(self, width: int, height: int, render_context: RenderContext):
        """
        Initialize renderer.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels
            render_context: Colors and raster settings
        """
        self.width = max(0, width)
        self.height = max(0, height)
        self.context = render_context
        self.geometry = DialGeometry.for_surface(self.width, self.height)
        self.shape_builder = ShapeBuilder(self.geometry)
        self.composer = FrameComposer(render_context)

    def compose_frame(self, sample: TimeSample) -> Frame:
        """
        Build the draw operations for one time sample.

        Returns:
            Frame with no operations when the surface has no area
        """
        recorder = RecordingContext(self.width, self.height)
        if self.geometry.is_degenerate:
            return recorder.to_frame()

        angles = compute_angles(sample)
        face = self.shape_builder.build(
            angles, self.context.primary_color, self.context.accent_color
        )
        self.composer.render(recorder, self.width, self.height, self.geometry, face)
        return recorder.to_frame()

    def render_frame(self, sample: TimeSample) -> Image.Image:
        """
        Render a time sample as an image.

        Returns:
            RGBA image when the context is transparent, RGB otherwise
        """
        frame = self.compose_frame(sample)
        return self.rasterize(frame)

    def rasterize(self, frame: Frame) -> Image.Image:
        if not frame.width or not frame.height:
            mode = "RGBA" if self.context.background_color is None else "RGB"
            return Image.new(mode, (frame.width, frame.height))

        scale = max(1, self.context.supersample)
        overlay = Image.new(
            "RGBA", (frame.width * scale, frame.height * scale), (0, 0, 0, 0)
        )
        replay_frame(frame, PillowContext(overlay, scale=scale))
        if scale > 1:
            overlay = overlay.resize((frame.width, frame.height), Image.Resampling.LANCZOS)

        if self.context.background_color is None:
            return overlay

        background = Image.new("RGBA", overlay.size, (*self.context.background_color, 255))
        return Image.alpha_composite(background, overlay).convert("RGB")
