"""Shared animation orchestration used by the CLI entry point."""

from datetime import datetime

from .clock.raster_animation import generate_raster_frames
from .clock.render_context import RenderContext
from .constants import DEFAULT_DURATION, MAX_FPS
from .output import resolve_output_provider
from .output.base import OutputProvider


def clamp_fps(fps: int) -> int:
    """Keep the frame rate between 1 and the redraw floor's maximum."""
    return min(max(fps, 1), MAX_FPS)


def frame_count(fps: int, duration: float, max_frames: int | None) -> int:
    """Number of frames to export; an explicit ``max_frames`` wins over ``duration``."""
    if max_frames is not None:
        return max(0, max_frames)
    return max(1, round(duration * fps))


def encode_animation(
    start: datetime,
    output_path: str,
    *,
    width: int,
    height: int,
    render_context: RenderContext,
    fps: int,
    duration: float = DEFAULT_DURATION,
    max_frames: int | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """Encode clock animation bytes starting at ``start`` for the given output path."""
    fps = clamp_fps(fps)
    target_provider = provider or resolve_output_provider(output_path)
    frames = generate_raster_frames(
        start,
        width,
        height,
        render_context,
        fps,
        max_frames=frame_count(fps, duration, max_frames),
    )
    return target_provider.encode(frames, frame_duration=1000 // fps)
