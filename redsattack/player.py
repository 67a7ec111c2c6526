"""The player's ship and the spare-life icons."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from redsattack.aliens import Box
from redsattack.explosion import LAST_FRAME, Explosion
from redsattack.settings import Settings

PLAYER_IMAGE = "GalaxianGalaxip.gif"
INVINCIBLE_FRAMES = 60


class PlayerState(IntEnum):
    NORMAL = 0
    EXPLODING = 1
    RESPAWNING = 2
    INVINCIBLE = 3


class Player:
    """The ship at the bottom of the screen."""

    def __init__(self, settings: Settings, width: int, height: int):
        self.settings = settings
        self.width = width
        self.height = height
        self.dx = 0
        self.state = PlayerState.NORMAL
        self.lives = settings.num_lives
        self.invincible = 0
        self.x = settings.width // 2 - width // 2
        self.y = settings.height - height * 2 + 2

    @property
    def box(self) -> Box:
        """The ship's rectangle."""
        return Box(self.x, self.y, self.width, self.height)

    def _apply_move(self) -> None:
        self.x += self.dx

    def move_left(self) -> None:
        """Move one step to the left."""
        self.dx = -self.settings.player_speed
        self._apply_move()

    def move_right(self) -> None:
        """Move one step to the right."""
        self.dx = self.settings.player_speed
        self._apply_move()

    def stop(self) -> None:
        """Stop moving sideways."""
        self.dx = 0

    def die(self) -> None:
        """Start exploding."""
        self.state = PlayerState.EXPLODING

    def bonus_life(self) -> None:
        """Award an extra life."""
        self.lives += 1

    def respawn(self) -> None:
        """Return to the centre, spend a life and become briefly invincible."""
        self.dx = 0
        self.state = PlayerState.INVINCIBLE
        self.invincible = INVINCIBLE_FRAMES
        self.x = self.settings.width // 2 - self.width // 2
        self.lives -= 1

    def tick_invincibility(self) -> None:
        """Count down invincibility, returning to normal when it runs out."""
        if self.invincible > 0:
            self.invincible -= 1
        elif self.state == PlayerState.INVINCIBLE:
            self.state = PlayerState.NORMAL

    def update_explosion(self, explosion: Explosion) -> None:
        """Start the explosion of an exploding ship; wait to respawn once it ends."""
        if self.state != PlayerState.EXPLODING:
            return
        if not explosion.alive and explosion.state != LAST_FRAME:
            explosion.set_coords(self.x, self.y)
        if explosion.state == LAST_FRAME:
            self.state = PlayerState.RESPAWNING

    def draw(self, surface: Any, image: Any) -> None:
        """Blit the ship unless it is exploding or waiting to respawn."""
        if self.state in (PlayerState.NORMAL, PlayerState.INVINCIBLE):
            surface.blit(image, (self.x, self.y))


class LifeIcon:
    """A small ship in the bottom-left corner standing for a spare life."""

    def __init__(self, settings: Settings, index: int, width: int, height: int):
        self.width = width
        self.height = height
        self.alive = True
        self.x = 1 + index * width
        self.y = settings.height - height

    def draw(self, surface: Any, image: Any) -> None:
        """Blit the icon."""
        if self.alive:
            surface.blit(image, (self.x, self.y))