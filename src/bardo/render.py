from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from easel.color import RGBA
from easel.geom import Rect


class RenderTarget(Protocol):
    def size(self) -> tuple[int, int]: ...

    def clear(self, color: RGBA) -> None: ...

    def blit(self, texture: object, src: Rect, dst: Rect) -> None: ...

    def present(self) -> None: ...


class Renderable(Protocol):
    def draw(self, target: RenderTarget) -> None: ...


class Renderer:
    """Draw renderables back to front, then present the frame.

    Target failures propagate; a frame that cannot be drawn aborts the loop.
    """

    def render(self, target: RenderTarget, renderables: Iterable[Renderable]) -> None:
        for renderable in renderables:
            renderable.draw(target)
        target.present()
