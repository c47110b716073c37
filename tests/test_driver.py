"""Tests for the animation driver and host clocks."""

from datetime import datetime, timedelta

import pytest

from hey_clock.clock import (
    AnimationDriver,
    ClockRenderer,
    FixedClock,
    SteppedClock,
    TimeSample,
    generate_raster_frames,
)
from hey_clock.constants import MIN_FRAME_INTERVAL


class FakeTimer:
    """Monotonic timer advanced by hand."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def small_renderer(transparent_context) -> ClockRenderer:
    return ClockRenderer(40, 40, transparent_context)


def test_tick_throttles_to_min_interval(small_renderer):
    """tick should skip renders closer together than the minimum interval."""
    timer = FakeTimer()
    driver = AnimationDriver(small_renderer, FixedClock(datetime(2024, 1, 1, 3)), monotonic=timer)

    assert driver.tick() is not None
    timer.now = 0.01
    assert driver.tick() is None
    timer.now = 0.049
    assert driver.tick() is None
    timer.now = 0.06
    assert driver.tick() is not None


def test_min_interval_is_never_below_floor(small_renderer):
    """Intervals faster than 1/20s should be raised to the floor."""
    driver = AnimationDriver(small_renderer, min_interval=0.001)

    assert driver.min_interval == MIN_FRAME_INTERVAL


def test_slower_interval_is_kept(small_renderer):
    """Intervals slower than the floor should be kept."""
    driver = AnimationDriver(small_renderer, min_interval=0.5)

    assert driver.min_interval == 0.5


def test_sample_reads_clock(small_renderer):
    """sample should read the host clock into a TimeSample."""
    driver = AnimationDriver(
        small_renderer, FixedClock(datetime(2024, 5, 6, 7, 8, 9, 10))
    )

    assert driver.sample() == TimeSample(7, 8, 9, 10_000)


def test_seconds_until_next_frame(small_renderer):
    """The wait until the next frame should shrink as time passes."""
    timer = FakeTimer()
    driver = AnimationDriver(small_renderer, FixedClock(datetime(2024, 1, 1)), monotonic=timer)

    assert driver.seconds_until_next_frame() == 0.0
    driver.tick()
    timer.now = 0.02
    assert driver.seconds_until_next_frame() == pytest.approx(0.03)
    timer.now = 1.0
    assert driver.seconds_until_next_frame() == 0.0


def test_iter_frames_samples_clock_per_frame(small_renderer):
    """iter_frames should read the clock once per frame."""
    clock = SteppedClock(datetime(2024, 1, 1, 0, 0, 0), timedelta(seconds=1))
    driver = AnimationDriver(small_renderer, clock)

    frames = list(driver.iter_frames(max_frames=3))

    assert len(frames) == 3
    assert clock.now() == datetime(2024, 1, 1, 0, 0, 3)
    assert frames[0].tobytes() != frames[1].tobytes()


def test_run_until_host_stops(small_renderer):
    """run should keep rendering until the host stops it."""
    timer = FakeTimer()
    sleeps: list[float] = []
    received = []
    remaining = iter(range(5))

    def sleep(seconds: float) -> None:
        sleeps.append(seconds)
        timer.now += 0.06

    driver = AnimationDriver(small_renderer, FixedClock(datetime(2024, 1, 1)), monotonic=timer)
    rendered = driver.run(
        on_frame=received.append,
        sleep=sleep,
        should_continue=lambda: next(remaining, None) is not None,
    )

    assert rendered == 5
    assert len(received) == 5
    assert len(sleeps) == 5
    assert all(0 <= s <= MIN_FRAME_INTERVAL for s in sleeps)


def test_resize_rebuilds_renderer(small_renderer):
    """resize should only rebuild the renderer when the size changes."""
    driver = AnimationDriver(small_renderer, FixedClock(datetime(2024, 1, 1)))

    driver.resize(40, 40)
    assert driver.renderer is small_renderer

    driver.resize(80, 60)
    assert driver.render_now().size == (80, 60)
    assert driver.renderer.context is small_renderer.context


def test_stepped_clock_advances_after_each_read():
    """SteppedClock should advance by its step after every read."""
    clock = SteppedClock(datetime(2024, 1, 1), timedelta(milliseconds=50))

    assert clock.now() == datetime(2024, 1, 1)
    assert clock.now() == datetime(2024, 1, 1, 0, 0, 0, 50_000)


def test_generate_raster_frames(transparent_context):
    """generate_raster_frames should yield frames of the surface size."""
    frames = list(
        generate_raster_frames(
            datetime(2024, 1, 1, 10, 9, 30), 32, 32, transparent_context, fps=20, max_frames=4
        )
    )

    assert len(frames) == 4
    assert all(frame.size == (32, 32) for frame in frames)


def test_run_skips_failed_frame(small_renderer):
    """A frame that fails to deliver should be dropped without stopping the loop."""
    timer = FakeTimer()
    attempts = []
    delivered = []
    remaining = iter(range(3))

    def on_frame(frame) -> None:
        attempts.append(frame)
        if len(attempts) == 1:
            raise OSError("file busy")
        delivered.append(frame)

    def sleep(seconds: float) -> None:
        timer.now += 0.06

    driver = AnimationDriver(small_renderer, FixedClock(datetime(2024, 1, 1)), monotonic=timer)
    rendered = driver.run(
        on_frame=on_frame,
        sleep=sleep,
        should_continue=lambda: next(remaining, None) is not None,
    )

    assert len(attempts) == 3
    assert len(delivered) == 2
    assert rendered == 2
    assert driver.failed_frames == 1


def test_run_lets_host_interrupt_through(small_renderer):
    """KeyboardInterrupt is host teardown and should end the loop."""
    def on_frame(frame) -> None:
        raise KeyboardInterrupt

    driver = AnimationDriver(small_renderer, FixedClock(datetime(2024, 1, 1)))

    with pytest.raises(KeyboardInterrupt):
        driver.run(on_frame=on_frame, sleep=lambda seconds: None)
    assert driver.failed_frames == 0
