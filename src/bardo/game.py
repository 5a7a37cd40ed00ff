from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .background import Background, ColorCycle
from .input import KeyEvent, dispatch_key_events
from .player import Player
from .render import Renderable
from .sim import FixedStepClock


@dataclass(slots=True)
class GameSession:
    """Everything the frame loop owns: the player, the background and the tick clock."""

    player: Player = field(default_factory=Player)
    background: Background = field(default_factory=Background)
    colors: ColorCycle = field(default_factory=ColorCycle)
    clock: FixedStepClock = field(default_factory=FixedStepClock)

    @property
    def ticks(self) -> int:
        return self.clock.elapsed

    def handle_events(self, events: Iterable[KeyEvent]) -> int:
        return dispatch_key_events(self.player, events)

    def tick(self) -> None:
        # The frame shows the color sampled before the cycle steps.
        self.background.color = self.colors.color
        self.colors.advance()
        self.player.update()

    def advance(self, dt: float) -> int:
        due = self.clock.advance(dt)
        for _ in due:
            self.tick()
        return len(due)

    def renderables(self) -> tuple[Renderable, ...]:
        return (self.background, self.player)
