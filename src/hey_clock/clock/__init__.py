"""Clock face rendering: angles, shapes, composition and frame driving."""

from .angles import Angle, HandAngles, compute_angles, correct_half_turn, raw_angle_degrees
from .clocks import Clock, FixedClock, SteppedClock, SystemClock
from .composer import FrameComposer
from .drawing_context import CompositeMode, DrawingContext, DrawOp, Frame, RecordingContext
from .driver import AnimationDriver
from .geometry import DialGeometry, radius_for_size
from .pillow_context import PillowContext
from .raster_animation import generate_raster_frames
from .render_context import ColorScheme, RenderContext
from .renderer import ClockRenderer
from .shape_builder import ClockFace, HandShapes, HandSpec, ShapeBuilder
from .shapes import Circle, Glyph, Polygon
from .time_sample import TimeSample

__all__ = [
    "Angle",
    "AnimationDriver",
    "Circle",
    "Clock",
    "ClockFace",
    "ClockRenderer",
    "ColorScheme",
    "CompositeMode",
    "DialGeometry",
    "DrawOp",
    "DrawingContext",
    "FixedClock",
    "Frame",
    "FrameComposer",
    "Glyph",
    "HandAngles",
    "HandShapes",
    "HandSpec",
    "PillowContext",
    "Polygon",
    "RecordingContext",
    "RenderContext",
    "ShapeBuilder",
    "SteppedClock",
    "SystemClock",
    "TimeSample",
    "compute_angles",
    "correct_half_turn",
    "generate_raster_frames",
    "radius_for_size",
    "raw_angle_degrees",
]
