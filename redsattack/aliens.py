"""Alien ships: formation movement, swooping attacks, scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Sequence

from redsattack.explosion import LAST_FRAME, Explosion
from redsattack.settings import Settings

ESCORT_SIZE = 3


@dataclass
class Box:
    """An axis-aligned rectangle with inclusive edges."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def overlaps(self, other: Box) -> bool:
        """True when the two rectangles touch or overlap."""
        horizontal = (other.x <= self.x <= other.right) or (self.x <= other.x <= self.right)
        vertical = (other.y <= self.y <= other.bottom) or (self.y <= other.y <= self.bottom)
        return horizontal and vertical


class AlienState(IntEnum):
    NORMAL = 0
    ATTACKING = 1
    RESETTING = 2
    DYING = 3
    DEAD = 4


class Alien:
    """An alien that drifts with the formation and swoops down to attack."""

    AMPLITUDE = 100
    PERIOD = 80.0
    IMAGE = ""

    def __init__(self, settings: Settings, width: int, height: int, points: int = 0):
        self.settings = settings
        self.width = width
        self.height = height
        self.points = points
        self.dx = settings.alien_speed
        self.dy = 0
        self.speed = settings.alien_speed
        self.alive = True
        self.state = AlienState.NORMAL
        self.x = 0
        self.y = 0
        self.drawn_x = 0
        self.drawn_y = 0
        self.memory_x = settings.spacing
        self.memory_y = settings.spacing
        self.median = 0

    @property
    def box(self) -> Box:
        """Where the alien was last drawn."""
        return Box(self.drawn_x, self.drawn_y, self.width, self.height)

    def _swoop_x(self) -> int:
        return int(self.AMPLITUDE * math.sin(self.y / self.PERIOD) + self.median)

    def _step(self, pause_frames: int, attack_x: Callable[[], int]) -> None:
        if self.state == AlienState.NORMAL:
            if pause_frames == 0:
                self.x += self.dx
        elif self.state == AlienState.ATTACKING:
            self.y += self.dy
            new_x = attack_x()
            if new_x is not None:
                self.x = new_x
            if self.y > self.settings.height:
                self.reset()
            if pause_frames == 0:
                self.memory_x += self.dx
        elif self.state == AlienState.RESETTING:
            if self.y >= self.memory_y:
                self.y = self.memory_y
                self.state = AlienState.NORMAL
                self.dy = 0
            else:
                self.y += self.dy
            if pause_frames == 0:
                self.memory_x += self.dx
            self.x = self.memory_x

    def move(self, pause_frames: int) -> None:
        """Advance one frame; the formation only steps when pause_frames is 0."""
        self._step(pause_frames, self._swoop_x)

    def attack(self) -> None:
        """Leave the formation and swoop, if currently in formation."""
        if self.state == AlienState.NORMAL:
            self.state = AlienState.ATTACKING
            self.memory_x = self.x
            self.memory_y = self.y
            self.dy = self.speed // 2
            self.median = self.x

    def reset(self) -> None:
        """Return from the bottom of the screen to the top."""
        self.state = AlienState.RESETTING
        self.x = self.memory_x
        self.y = 0

    def _attack_points(self) -> int:
        return self.points * 2

    def die(self) -> int:
        """Mark the alien as hit and return the points it is worth."""
        if self.state in (AlienState.NORMAL, AlienState.RESETTING):
            awarded = self.points
        elif self.state == AlienState.ATTACKING:
            awarded = self._attack_points()
        else:
            awarded = 0
        self.state = AlienState.DYING
        self.alive = False
        return awarded

    def reverse(self) -> None:
        """Reverse the formation direction."""
        self.dx = -self.dx

    def update_explosion(self, explosion: Explosion) -> None:
        """Start the explosion of a dying alien and mark it dead once it ends."""
        if self.state != AlienState.DYING:
            return
        if not explosion.alive:
            explosion.set_coords(self.drawn_x, self.drawn_y)
        if explosion.state == LAST_FRAME:
            self.state = AlienState.DEAD

    def draw(self, surface: Any, image: Any) -> None:
        """Blit the alien at its position unless it is dying or dead."""
        if self.state in (AlienState.DYING, AlienState.DEAD):
            return
        self.drawn_x = self.x
        self.drawn_y = self.y
        surface.blit(image, (self.drawn_x, self.drawn_y))


class AquaAlien(Alien):
    AMPLITUDE = 50
    PERIOD = 100.0
    IMAGE = "GalaxianAquaAlien.gif"

    def __init__(self, settings: Settings, width: int, height: int):
        super().__init__(settings, width, height, settings.aqua_score)

    def place(self, index: int, row: int) -> None:
        """Put the alien at its starting slot in the given row."""
        s = self.settings
        self.alive = True
        self.state = AlienState.NORMAL
        self.x = index * s.spacing + s.width // s.num_aqua - self.width // 2
        self.y = (row + 1) * s.col_space + self.height + s.col_space

    def reset(self) -> None:
        self.state = AlienState.RESETTING
        self.y = 0
        self.dy = self.settings.alien_speed // 2


class PurpleAlien(Alien):
    AMPLITUDE = 75
    PERIOD = 50.0
    IMAGE = "GalaxianPurpleAlien.gif"

    def __init__(self, settings: Settings, width: int, height: int):
        super().__init__(settings, width, height, settings.purple_score)

    def place(self, index: int) -> None:
        """Put the alien at its starting slot."""
        s = self.settings
        self.alive = True
        self.state = AlienState.NORMAL
        self.x = index * s.spacing + s.purple_start + s.width // s.num_purple - self.width // 2
        self.y = s.col_space * 3


class RedAlien(Alien):
    AMPLITUDE = 100
    PERIOD = 80.0
    IMAGE = "GalaxianRedAlien.gif"

    def __init__(self, settings: Settings, width: int, height: int):
        super().__init__(settings, width, height, settings.red_score)

    def place(self, index: int) -> None:
        """Put the alien at its starting slot."""
        s = self.settings
        self.alive = True
        self.state = AlienState.NORMAL
        self.x = index * s.spacing + s.red_start + s.width // s.num_red - self.width // 2
        self.y = s.col_space * 2


class FlagShip(Alien):
    AMPLITUDE = 100
    PERIOD = 80.0
    IMAGE = "GalaxianFlagship.gif"

    def __init__(self, settings: Settings, width: int, height: int):
        super().__init__(settings, width, height, settings.flag_score)

    def place(self, index: int) -> None:
        """Put the flagship at the first or second flagship slot."""
        s = self.settings
        self.alive = True
        self.state = AlienState.NORMAL
        self.x = s.flag_start1 if index == 0 else s.flag_start2
        self.y = s.col_space

    def _attack_points(self) -> int:
        return self.points * 2 + self.points // 2

    def _escort_x(self, escorts: Sequence[Alien], flight: int) -> int:
        group = escorts[flight * ESCORT_SIZE:(flight + 1) * ESCORT_SIZE]
        for slot, escort in enumerate(group):
            if escort.alive:
                return escort.drawn_x + (1 - slot) * self.settings.spacing
        return self._swoop_x()

    def move_with_escort(self, pause_frames: int, escorts: Sequence[Alien],
                         flight: int) -> None:
        """Advance one frame, flying alongside the first living escort of the flight."""
        self._step(pause_frames, lambda: self._escort_x(escorts, flight))