from __future__ import annotations

from dataclasses import dataclass, field

from easel.color import RGBA

from .render import RenderTarget

COLOR_CYCLE_PERIOD = 255
_GREEN = 64


def cycle_color(tick: int) -> RGBA:
    """Background color for any tick count; the hue wraps every `COLOR_CYCLE_PERIOD` ticks."""
    i = int(tick) % COLOR_CYCLE_PERIOD
    return RGBA.from_bytes(i, _GREEN, 255 - i)


@dataclass(slots=True)
class ColorCycle:
    """Per-tick background hue sweep, owned by the render loop."""

    tick: int = 0

    @property
    def color(self) -> RGBA:
        return cycle_color(self.tick)

    def advance(self) -> None:
        self.tick = (self.tick + 1) % COLOR_CYCLE_PERIOD


@dataclass(slots=True)
class Background:
    color: RGBA = field(default_factory=lambda: cycle_color(0))

    def draw(self, target: RenderTarget) -> None:
        target.clear(self.color)
