"""Six-frame explosion animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

FRAME_COUNT = 6
LAST_FRAME = FRAME_COUNT - 1
FRAME_DELAY = 5
FRAME_FILES = tuple(f"explosion{n}.gif" for n in range(1, FRAME_COUNT + 1))


@dataclass
class Explosion:
    """An explosion that plays once at a position and then goes idle."""

    x: int = 0
    y: int = 0
    alive: bool = False
    state: int = 0
    delay: int = FRAME_DELAY

    def set_coords(self, x: int, y: int) -> None:
        """Place the explosion and start it."""
        self.x = x
        self.y = y
        self.alive = True

    def advance(self) -> None:
        """Count down the frame delay, moving to the next frame when it runs out."""
        if self.delay != 0:
            self.delay -= 1
        else:
            self.delay = FRAME_DELAY
            self.state += 1

    def draw(self, surface: Any, frames: Sequence[Any], boom: Any = None) -> None:
        """Blit the current frame; the last frame ends the animation."""
        if not self.alive:
            return
        if self.state == 0 and boom is not None:
            boom.play()
        surface.blit(frames[self.state], (self.x, self.y))
        if self.state < LAST_FRAME:
            self.advance()
        else:
            self.state = 0
            self.alive = False