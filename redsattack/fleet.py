"""The alien formation as a whole: placement, marching, attacks and waves."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import chain, zip_longest
from typing import Callable, Iterator, Mapping, Optional

from redsattack.aliens import (
    ESCORT_SIZE,
    Alien,
    AlienState,
    AquaAlien,
    FlagShip,
    PurpleAlien,
    RedAlien,
)
from redsattack.lasers import AlienLaser
from redsattack.player import Player, PlayerState
from redsattack.settings import Settings

AQUA_ROWS = 3
PAUSE_FRAMES = 20
RESPAWN_FRAMES = 400
CHANGE_DELAY = 2500
EDGE_MARGIN = 5
ATTACK_ROLL = 10
ATTACK_HITS = (1, 2)


@dataclass
class Formation:
    """Every alien of a wave together with the laser each one fires."""

    aqua_rows: list[list[AquaAlien]]
    purple: list[PurpleAlien]
    red: list[RedAlien]
    flags: list[FlagShip]
    aqua_lasers: list[list[AlienLaser]]
    purple_lasers: list[AlienLaser]
    red_lasers: list[AlienLaser]
    flag_lasers: list[AlienLaser]

    @classmethod
    def create(cls, settings: Settings,
               sizes: Mapping[type, tuple[int, int]]) -> Formation:
        """Build a full formation; sizes maps each alien class to its image size."""

        def build(kind: type, count: int) -> list:
            width, height = sizes[kind]
            return [kind(settings, width, height) for _ in range(count)]

        def lasers(count: int) -> list[AlienLaser]:
            return [AlienLaser(settings) for _ in range(count)]

        return cls(
            aqua_rows=[build(AquaAlien, settings.num_aqua) for _ in range(AQUA_ROWS)],
            purple=build(PurpleAlien, settings.num_purple),
            red=build(RedAlien, settings.num_red),
            flags=build(FlagShip, settings.num_flag),
            aqua_lasers=[lasers(settings.num_aqua) for _ in range(AQUA_ROWS)],
            purple_lasers=lasers(settings.num_purple),
            red_lasers=lasers(settings.num_red),
            flag_lasers=lasers(settings.num_flag),
        )

    def all_aliens(self) -> list[Alien]:
        """Every alien: the aqua rows, then purple, red and the flagships."""
        return list(chain(*self.aqua_rows, self.purple, self.red, self.flags))

    def slots(self) -> Iterator[list[Alien]]:
        """The aliens sharing each column index, in row order."""
        for group in zip_longest(*self.aqua_rows, self.purple, self.red, self.flags):
            yield [alien for alien in group if alien is not None]

    def _armed(self) -> Iterator[tuple[Alien, AlienLaser]]:
        rows = zip(chain(*self.aqua_rows, self.purple, self.red),
                   chain(*self.aqua_lasers, self.purple_lasers, self.red_lasers))
        yield from rows


def reverse_all(formation: Formation) -> None:
    """Reverse the marching direction of every alien."""
    for alien in formation.all_aliens():
        alien.reverse()


class Fleet:
    """Drives a formation: timing, attack waves, edge turns and respawning."""

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.attacking_aqua = 0
        self.attacking_purple = 0
        self.aqua_timer = self._new_aqua_timer()
        self.purple_timer = self._new_purple_timer()
        self.flag_timer = self._new_flag_timer()
        self.alive = True
        self.level = 1
        self.pause_frames = PAUSE_FRAMES
        self.respawn_timer = RESPAWN_FRAMES
        self.respawning = False
        self.change_delay = CHANGE_DELAY
        self.changing = True

    def _new_aqua_timer(self) -> int:
        return self.rng.randrange(200) + 300

    def _new_purple_timer(self) -> int:
        return self.rng.randrange(300) + 400

    def _new_flag_timer(self) -> int:
        return self.rng.randrange(500) + 650

    def place(self, formation: Formation) -> None:
        """Put every alien at its starting slot."""
        for row_number, row in enumerate(formation.aqua_rows, start=1):
            for index, alien in enumerate(row):
                alien.place(index, row_number)
        for group in (formation.purple, formation.red, formation.flags):
            for index, alien in enumerate(group):
                alien.place(index)

    def move(self, formation: Formation,
             on_fire: Optional[Callable[[], None]] = None) -> None:
        """Advance every alien and alien laser by one frame."""
        pause = self.pause_frames
        for alien, laser in formation._armed():
            alien.move(pause)
            self._watch(laser, alien, on_fire)
        for flight, (flag, laser) in enumerate(zip(formation.flags, formation.flag_lasers)):
            flag.move_with_escort(pause, formation.red, flight)
            self._watch(laser, flag, on_fire)
        if self.pause_frames > 0:
            self.pause_frames -= 1
        else:
            self.pause_frames = PAUSE_FRAMES

    @staticmethod
    def _watch(laser: AlienLaser, alien: Alien,
               on_fire: Optional[Callable[[], None]]) -> None:
        if laser.watch(alien) and on_fire is not None:
            on_fire()
        laser.advance()

    def check_respawn(self, formation: Formation) -> bool:
        """Count down to a new wave once every alien is gone; True when it arrives."""
        self.alive = any(alien.alive for alien in formation.all_aliens())
        if not self.alive and not self.respawning:
            self.respawning = True
        if self.respawning and self.respawn_timer > 0:
            self.respawn_timer -= 1
        elif self.respawning and self.respawn_timer == 0:
            self.level += 1
            self.alive = True
            self.respawn_timer = RESPAWN_FRAMES
            self.respawning = False
            self.place(formation)
            return True
        return False

    def _at_edge(self, alien: Alien) -> bool:
        limit = self.settings.width - EDGE_MARGIN

        def near(x: int) -> bool:
            return x + alien.width >= limit or x <= EDGE_MARGIN

        if alien.state == AlienState.NORMAL:
            return near(alien.drawn_x)
        if alien.state == AlienState.RESETTING:
            return near(alien.memory_x)
        return False

    def change_direction(self, formation: Formation) -> None:
        """Turn the formation round when any alien reaches a side edge."""
        for slot in formation.slots():
            if not self.changing and any(self._at_edge(alien) for alien in slot):
                reverse_all(formation)
                self.changing = True
                break
            if self.changing and self.change_delay == 0:
                self.changing = False
                self.change_delay = CHANGE_DELAY
            elif self.changing and self.change_delay > 0:
                self.change_delay -= 1

    def attack(self, formation: Formation) -> None:
        """Run the attack timers and send aliens swooping when they expire."""
        max_aqua = self.level + 2
        max_purple = self.level
        self.attacking_aqua = 0
        self.attacking_purple = 0

        if self.aqua_timer > 0:
            self.aqua_timer -= 1
        else:
            self.aqua_timer = self._new_aqua_timer()
        if self.purple_timer > 0:
            self.purple_timer -= 1
        else:
            self.purple_timer = self._new_purple_timer()
        if self.flag_timer > 0:
            self.flag_timer -= 1
        else:
            self.flag_timer = self._new_flag_timer()

        for index, group in enumerate(zip_longest(*formation.aqua_rows, formation.purple)):
            *aquas, purple = group
            if self.aqua_timer == 0:
                rolls = [self.rng.randrange(ATTACK_ROLL) for _ in aquas]
                for alien, roll in zip(aquas, rolls):
                    if roll in ATTACK_HITS and self.attacking_aqua < max_aqua:
                        alien.attack()
                        if alien.state == AlienState.ATTACKING:
                            self.attacking_aqua += 1
            if purple is not None and self.purple_timer == 0:
                roll = self.rng.randrange(ATTACK_ROLL)
                if roll in ATTACK_HITS and self.attacking_purple < max_purple:
                    purple.attack()
                    self.attacking_purple += 1
            if index == 0 and self.flag_timer == 0:
                flight = self.rng.randrange(self.settings.num_flag)
                escorts = formation.red[flight * ESCORT_SIZE:(flight + 1) * ESCORT_SIZE]
                for escort in escorts:
                    escort.attack()
                formation.flags[flight].attack()

    def collide_player(self, player: Player, formation: Formation) -> int:
        """Crash attacking aliens into the player; return the points scored."""
        scored = 0
        player_box = player.box
        for slot in formation.slots():
            for alien in slot:
                if not alien.box.overlaps(player_box):
                    continue
                if player.state == PlayerState.NORMAL and alien.state == AlienState.ATTACKING:
                    scored += alien.die()
                    player.die()
        return scored