"""Raster (Pillow) animation frame generators built on top of the animation driver."""

from datetime import datetime, timedelta
from typing import Iterator

from PIL import Image

from .clocks import SteppedClock
from .driver import AnimationDriver
from .render_context import RenderContext
from .renderer import ClockRenderer


def generate_raster_frames(
    start: datetime,
    width: int,
    height: int,
    render_context: RenderContext,
    fps: int,
    max_frames: int | None = None,
) -> Iterator[Image.Image]:
    """Render consecutive clock frames starting at ``start``, ``1/fps`` seconds apart."""
    renderer = ClockRenderer(width, height, render_context)
    clock = SteppedClock(start, timedelta(seconds=1 / fps))
    driver = AnimationDriver(renderer, clock=clock)
    yield from driver.iter_frames(max_frames=max_frames)
