"""CLI interface for hey-clock."""

import os
import sys
from dataclasses import replace
from datetime import datetime, time
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .animation_pipeline import clamp_fps, encode_animation, frame_count
from .clock.clocks import SystemClock
from .clock.driver import AnimationDriver
from .clock.render_context import ColorScheme, RenderContext
from .clock.renderer import ClockRenderer
from .constants import DEFAULT_DURATION, DEFAULT_FPS, DEFAULT_SIZE, DEFAULT_SUPERSAMPLE, MAX_FPS
from .output import resolve_output_provider, supported_output_formats

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()
SCHEME_ENV_VAR = "HEY_CLOCK_SCHEME"


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    out: str = typer.Option(
        "hey-clock.gif",
        "--output",
        "-o",
        help=f"Animation file to write ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE,
        "--size",
        help="Edge length of the square drawing surface in pixels",
    ),
    width: int | None = typer.Option(
        None,
        "--width",
        help="Surface width in pixels (overrides --size)",
    ),
    height: int | None = typer.Option(
        None,
        "--height",
        help="Surface height in pixels (overrides --size)",
    ),
    fps: int = typer.Option(
        DEFAULT_FPS,
        "--fps",
        help=f"Frames per second for the animation (at most {MAX_FPS})",
    ),
    duration: float = typer.Option(
        DEFAULT_DURATION,
        "--duration",
        help="Seconds of clock time to animate",
    ),
    max_frames: int | None = typer.Option(
        None,
        "--max-frame",
        help="Maximum number of frames to generate (overrides --duration)",
    ),
    at: str | None = typer.Option(
        None,
        "--at",
        help="Start time in ISO format, e.g. 2024-01-01T03:00:00 or 10:09:30 (default: now)",
    ),
    scheme: str | None = typer.Option(
        None,
        "--scheme",
        help=f"Color scheme: light or dark (default: ${SCHEME_ENV_VAR} or light)",
    ),
    transparent: bool = typer.Option(
        False,
        "--transparent",
        help="Leave the background and hub cutout transparent",
    ),
    supersample: int = typer.Option(
        DEFAULT_SUPERSAMPLE,
        "--supersample",
        help="Render at N times the size and downsample for smoother edges",
    ),
    live: bool = typer.Option(
        False,
        "--live",
        help="Keep re-rendering the current time into the output image until interrupted",
    ),
) -> None:
    """
    Render an analog clock face.

    By default a short animation starting at the current local time is
    written to the output file. With --live the output image is redrawn
    continuously (at most 20 times per second) until Ctrl+C.

    Examples:
      # Five seconds of animation, dark theme
      hey-clock --scheme dark -o clock.webp

      # Still-ish frame at ten past ten
      hey-clock --at 10:09:30 --max-frame 1 -o clock.png
    """
    try:
        surface_width = width if width is not None else size
        surface_height = height if height is not None else size
        if surface_width <= 0 or surface_height <= 0:
            raise CLIError(
                f"Surface size must be positive, got {surface_width}x{surface_height}"
            )
        render_context = _resolve_render_context(scheme, transparent, supersample)

        if live:
            _run_live(out, surface_width, surface_height, render_context)
            return

        start = _parse_start_time(at) if at else datetime.now()
        _generate_output(
            out,
            start,
            surface_width,
            surface_height,
            render_context,
            fps,
            duration,
            max_frames,
        )

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _resolve_render_context(
    scheme: str | None, transparent: bool, supersample: int
) -> RenderContext:
    """Build the render context from options, falling back to the environment."""
    scheme_name = (scheme or os.getenv(SCHEME_ENV_VAR) or ColorScheme.LIGHT.value).lower()
    try:
        context = RenderContext.for_scheme(scheme_name)
    except ValueError:
        choices = ", ".join(s.value for s in ColorScheme)
        raise CLIError(f"Unknown color scheme '{scheme_name}'. Choose from: {choices}")

    if supersample < 1:
        raise CLIError("--supersample must be at least 1")
    if transparent:
        context = context.transparent()
    return replace(context, supersample=supersample)


def _parse_start_time(value: str) -> datetime:
    """Parse a full ISO timestamp, or a bare time of day on today's date."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.combine(datetime.now().date(), time.fromisoformat(value))
    except ValueError:
        raise CLIError(f"Invalid --at time '{value}'. Use ISO format, e.g. 10:09:30")


def _generate_output(
    output_path: str,
    start: datetime,
    width: int,
    height: int,
    render_context: RenderContext,
    fps: int,
    duration: float,
    max_frames: int | None,
) -> None:
    """Generate animation in the format specified by output_path."""
    if fps > MAX_FPS:
        console.print(
            f"[yellow]Warning:[/yellow] FPS is capped at {MAX_FPS} "
            f"(the clock never redraws faster than every {1000 // MAX_FPS}ms); using {MAX_FPS}"
        )
    fps = clamp_fps(fps)

    try:
        provider = resolve_output_provider(output_path)
    except ValueError as e:
        raise CLIError(str(e))

    ext = Path(output_path).suffix[1:].upper()
    frames = frame_count(fps, duration, max_frames)
    if frames == 0:
        raise CLIError("Nothing to render: --max-frame must be at least 1")
    console.print(
        f"\n[bold blue]Generating {ext} animation "
        f"({frames} frames from {start:%H:%M:%S})...[/bold blue]"
    )

    try:
        encoded = encode_animation(
            start,
            output_path,
            width=width,
            height=height,
            render_context=render_context,
            fps=fps,
            duration=duration,
            max_frames=max_frames,
            provider=provider,
        )
        console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
        provider.write(encoded)
        console.print(f"[green]✓[/green] {ext} saved to {output_path}")
    except Exception as e:
        raise CLIError(f"Failed to generate output: {e}")


def _run_live(
    output_path: str, width: int, height: int, render_context: RenderContext
) -> None:
    """Redraw the current time into ``output_path`` until interrupted."""
    driver = AnimationDriver(ClockRenderer(width, height, render_context), clock=SystemClock())
    console.print(
        f"[bold blue]Drawing live clock into {output_path} (Ctrl+C to stop)...[/bold blue]"
    )
    try:
        driver.run(on_frame=lambda frame: frame.save(output_path))
    except KeyboardInterrupt:
        console.print("\n[green]✓[/green] Stopped")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
