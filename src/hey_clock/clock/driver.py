"""Animation driver: samples the clock and renders frames at a bounded rate."""

import time
from typing import Callable, Iterator

from PIL import Image

from ..constants import MIN_FRAME_INTERVAL
from .clocks import Clock, SystemClock
from .renderer import ClockRenderer
from .time_sample import TimeSample


class AnimationDriver:
    """Feeds fresh time samples into a renderer, never faster than ``min_interval``."""

    def __init__(
        self,
        renderer: ClockRenderer,
        clock: Clock | None = None,
        min_interval: float = MIN_FRAME_INTERVAL,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize driver.

        Args:
            renderer: Renderer for the current surface
            clock: Source of wall-clock timestamps (local time by default)
            min_interval: Minimum seconds between renders; raised to the 1/20s floor
            monotonic: Timer used to throttle ``tick``
        """
        self.renderer = renderer
        self.clock = clock or SystemClock()
        self.min_interval = max(min_interval, MIN_FRAME_INTERVAL)
        self.monotonic = monotonic
        self._last_render: float | None = None
        self.failed_frames = 0

    def resize(self, width: int, height: int) -> None:
        """Follow a surface size change; takes effect on the next frame."""
        if (width, height) != (self.renderer.width, self.renderer.height):
            self.renderer = ClockRenderer(width, height, self.renderer.context)

    def sample(self) -> TimeSample:
        return TimeSample.from_datetime(self.clock.now())

    def render_now(self) -> Image.Image:
        """Render the current time without throttling."""
        return self.renderer.render_frame(self.sample())

    def tick(self) -> Image.Image | None:
        """
        Host tick callback.

        Returns:
            A new frame, or None when the previous render was too recent
        """
        now = self.monotonic()
        if self._last_render is not None and now - self._last_render < self.min_interval:
            return None
        self._last_render = now
        return self.render_now()

    def seconds_until_next_frame(self) -> float:
        if self._last_render is None:
            return 0.0
        return max(0.0, self.min_interval - (self.monotonic() - self._last_render))

    def iter_frames(self, max_frames: int | None = None) -> Iterator[Image.Image]:
        """Yield one frame per clock sample; endless unless ``max_frames`` is set."""
        rendered = 0
        while max_frames is None or rendered < max_frames:
            yield self.render_now()
            rendered += 1

    def run(
        self,
        on_frame: Callable[[Image.Image], None],
        sleep: Callable[[float], None] = time.sleep,
        should_continue: Callable[[], bool] = lambda: True,
    ) -> int:
        """
        Drive frames until the host stops the loop.

        Args:
            on_frame: Receives every rendered frame
            sleep: Blocking wait between ticks
            should_continue: Checked before every tick

        Returns:
            Number of frames delivered to ``on_frame``
        """
        rendered = 0
        while should_continue():
            try:
                frame = self.tick()
                if frame is not None:
                    on_frame(frame)
                    rendered += 1
            except Exception:
                # A failed frame is dropped; the next tick supersedes it.
                self.failed_frames += 1
            sleep(self.seconds_until_next_frame())
        return rendered
