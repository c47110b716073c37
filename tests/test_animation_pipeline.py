"""Tests for the shared animation pipeline."""

from dataclasses import replace
from datetime import datetime
from io import BytesIO

from PIL import Image

from hey_clock.animation_pipeline import clamp_fps, encode_animation, frame_count
from hey_clock.clock import RenderContext
from hey_clock.output import GifOutputProvider


def test_clamp_fps():
    """Frame rate should be clamped between 1 and 20."""
    assert clamp_fps(60) == 20
    assert clamp_fps(20) == 20
    assert clamp_fps(10) == 10
    assert clamp_fps(0) == 1


def test_frame_count_prefers_max_frames():
    """An explicit frame limit should win over the duration."""
    assert frame_count(20, 5.0, None) == 100
    assert frame_count(20, 5.0, 3) == 3
    assert frame_count(10, 0.01, None) == 1


def test_encode_animation_gif():
    """encode_animation should produce one GIF frame per clock sample."""
    context = replace(RenderContext.darkmode(), supersample=1)

    encoded = encode_animation(
        datetime(2024, 1, 1, 10, 9, 30),
        "clock.gif",
        width=48,
        height=48,
        render_context=context,
        fps=1,
        max_frames=3,
    )

    with Image.open(BytesIO(encoded)) as image:
        assert image.format == "GIF"
        assert image.size == (48, 48)
        assert image.n_frames == 3


def test_encode_animation_uses_given_provider():
    """An explicit provider should override the output extension."""
    provider = GifOutputProvider()

    encoded = encode_animation(
        datetime(2024, 1, 1),
        "ignored.webp",
        width=16,
        height=16,
        render_context=replace(RenderContext.lightmode(), supersample=1),
        fps=20,
        max_frames=2,
        provider=provider,
    )

    assert encoded.startswith(b"GIF89")


def test_encode_animation_zero_size_surface():
    """A zero-size surface should encode to empty output rather than raise."""
    encoded = encode_animation(
        datetime(2024, 1, 1),
        "clock.gif",
        width=0,
        height=0,
        render_context=RenderContext.lightmode(),
        fps=20,
        max_frames=2,
    )

    assert encoded == b""
