"""Pixel-level tests for the Pillow renderer."""

from dataclasses import replace

from PIL import Image

from hey_clock.clock import (
    Circle,
    ClockRenderer,
    CompositeMode,
    PillowContext,
    RenderContext,
    TimeSample,
)
from hey_clock.clock.shapes import rectangle_points
from hey_clock.constants import ACCENT_COLOR

BLACK = (0, 0, 0, 255)


def test_hub_cutout_is_transparent(transparent_renderer):
    """The hub cutout should punch a fully transparent hole."""
    image = transparent_renderer.render_frame(TimeSample(3, 0, 0, 0))

    assert image.mode == "RGBA"
    assert image.size == (200, 200)
    assert image.getpixel((100, 100))[3] == 0


def test_hour_hand_points_to_three(transparent_renderer):
    """At 3:00 the hour hand should be painted right of the hub only."""
    image = transparent_renderer.render_frame(TimeSample(3, 0, 0, 0))

    assert image.getpixel((130, 100)) == BLACK
    assert image.getpixel((70, 100))[3] == 0


def test_outer_ring_is_stroked(transparent_renderer):
    """The outer ring should reach the surface edge, leaving corners empty."""
    image = transparent_renderer.render_frame(TimeSample(3, 0, 0, 0))

    assert image.getpixel((100, 2)) == BLACK
    assert image.getpixel((0, 0))[3] == 0


def test_second_hand_covers_minute_hand(transparent_renderer):
    """The second hand should be painted over the minute hand."""
    image = transparent_renderer.render_frame(TimeSample(0, 0, 0, 0))

    assert image.getpixel((100, 50)) == (*ACCENT_COLOR, 255)


def test_background_shows_through_cutout(light_context):
    """With a background, the cutout should show the background color."""
    image = ClockRenderer(200, 200, light_context).render_frame(TimeSample(3, 0, 0, 0))

    assert image.mode == "RGB"
    assert image.getpixel((100, 100)) == (255, 255, 255)
    assert image.getpixel((130, 100)) == (0, 0, 0)


def test_dark_scheme_inverts_primary_color():
    """Dark scheme should draw white hands on black."""
    context = replace(RenderContext.darkmode(), supersample=1)
    image = ClockRenderer(200, 200, context).render_frame(TimeSample(3, 0, 0, 0))

    assert image.getpixel((0, 0)) == (0, 0, 0)
    assert image.getpixel((130, 100)) == (255, 255, 255)


def test_supersampled_frame_has_surface_size():
    """Supersampled frames should be scaled back to the surface size."""
    image = ClockRenderer(64, 48, RenderContext.lightmode()).render_frame(TimeSample(8, 20, 0, 0))

    assert image.size == (64, 48)
    assert image.mode == "RGB"


def test_zero_size_surface_renders_blank_image(transparent_context):
    """A zero-size surface should render an empty image instead of failing."""
    image = ClockRenderer(0, 0, transparent_context).render_frame(TimeSample(3, 0, 0, 0))

    assert image.size == (0, 0)


def test_pillow_context_clear_mode_erases_pixels():
    """Clear mode should erase pixels and reset to normal afterwards."""
    image = Image.new("RGBA", (20, 20), (0, 0, 0, 0))
    context = PillowContext(image)

    context.fill(rectangle_points(0, 0, 20, 20), (255, 0, 0))
    with context.composite_mode(CompositeMode.CLEAR):
        context.fill(Circle((10.0, 10.0), 4.0), (255, 0, 0))

    assert image.getpixel((10, 10)) == (0, 0, 0, 0)
    assert image.getpixel((1, 1)) == (255, 0, 0, 255)
    assert context.mode is CompositeMode.NORMAL


def test_pillow_context_translate_and_scale():
    """Translation and scale should both apply to drawn coordinates."""
    image = Image.new("RGBA", (40, 40), (0, 0, 0, 0))
    context = PillowContext(image, scale=2)

    context.translate(10, 10)
    context.stroke(rectangle_points(-2, -2, 4, 4), (0, 0, 0), 1)

    assert image.getpixel((16, 16)) == BLACK
    assert image.getpixel((20, 20))[3] == 0
