"""Shots fired by the player and by attacking aliens."""

from __future__ import annotations

from typing import Any, Iterable

from redsattack.aliens import Alien, AlienState, Box
from redsattack.player import Player, PlayerState
from redsattack.settings import Settings

LASER_WIDTH = 5
LASER_HEIGHT = 10
PLAYER_LASER_COLOR = (0, 0, 255)
ALIEN_LASER_COLOR = (255, 255, 0)
FIRE_BAND = 10


class PlayerLaser:
    """A shot travelling up from the player's ship."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.speed = settings.player_laser_speed
        self.width = LASER_WIDTH
        self.height = LASER_HEIGHT
        self.alive = False
        self.x = 0
        self.y = 0

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    def fire(self, player: Player) -> None:
        """Launch from the nose of the ship, unless already in flight."""
        if self.alive:
            return
        self.alive = True
        self.x = player.x + player.width // 2 - self.width // 2
        self.y = self.settings.height - (player.height + player.height // 2)

    def advance(self) -> None:
        """Move up one step; leaving the top of the screen ends the shot."""
        if not self.alive:
            return
        if self.y > 0:
            self.y -= self.speed
        else:
            self.alive = False

    def hit_aliens(self, aliens: Iterable[Alien]) -> int:
        """Destroy the first living alien the shot touches; return points scored."""
        box = self.box
        scored = 0
        for alien in aliens:
            if not self.alive:
                break
            if alien.state not in (AlienState.NORMAL, AlienState.ATTACKING):
                continue
            if alien.box.overlaps(box):
                scored += alien.die()
                self.alive = False
        return scored

    def draw(self, surface: Any) -> None:
        """Fill the shot's rectangle while it is on screen."""
        if self.alive and self.y > 0:
            surface.fill(PLAYER_LASER_COLOR, (self.x, self.y, self.width, self.height))


class AlienLaser:
    """A shot dropped by an attacking alien."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.speed = settings.alien_laser_speed
        self.width = LASER_WIDTH
        self.height = LASER_HEIGHT
        self.alive = False
        self.x = 0
        self.y = 0

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    def fire_from(self, alien: Alien) -> None:
        """Launch from beneath the alien."""
        self.alive = True
        self.x = alien.drawn_x + alien.width // 2 - self.width // 2
        self.y = alien.drawn_y + alien.height

    def watch(self, alien: Alien) -> bool:
        """Fire when an attacking alien crosses the firing line; True if it fired."""
        fire_y = self.settings.fire_y
        in_band = fire_y <= alien.drawn_y <= fire_y + FIRE_BAND
        if in_band and alien.state == AlienState.ATTACKING and not self.alive:
            self.fire_from(alien)
            return True
        return False

    def advance(self) -> None:
        """Move down one step; leaving the bottom of the screen ends the shot."""
        if self.alive and self.y < self.settings.height:
            self.y += self.speed
        else:
            self.alive = False
            self.y = 0

    def hit_player(self, player: Player) -> bool:
        """Destroy a vulnerable player the shot touches; True on a hit."""
        if not self.box.overlaps(player.box):
            return False
        if player.state != PlayerState.NORMAL:
            return False
        self.alive = False
        self.y = 0
        player.die()
        return True

    def draw(self, surface: Any) -> None:
        """Fill the shot's rectangle while it is on screen."""
        if self.alive and self.y < self.settings.height:
            surface.fill(ALIEN_LASER_COLOR, (self.x, self.y, self.width, self.height))