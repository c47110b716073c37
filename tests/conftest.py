"""Shared fixtures for clock tests."""

from dataclasses import replace

import pytest

from hey_clock.clock import ClockRenderer, RenderContext


@pytest.fixture
def light_context() -> RenderContext:
    """Light theme rendered without supersampling so pixels are exact."""
    return replace(RenderContext.lightmode(), supersample=1)


@pytest.fixture
def transparent_context(light_context: RenderContext) -> RenderContext:
    return light_context.transparent()


@pytest.fixture
def transparent_renderer(transparent_context: RenderContext) -> ClockRenderer:
    return ClockRenderer(200, 200, transparent_context)
