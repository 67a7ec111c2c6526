import pytest

from redsattack.aliens import (
    AlienState,
    AquaAlien,
    Box,
    FlagShip,
    PurpleAlien,
    RedAlien,
)
from redsattack.explosion import LAST_FRAME, Explosion
from redsattack.settings import Settings


class FakeSurface:
    def __init__(self):
        self.blits = []

    def blit(self, image, pos):
        self.blits.append((image, pos))


@pytest.fixture
def settings():
    return Settings()


def test_box_overlap_symmetric_and_inclusive():
    a = Box(0, 0, 10, 10)
    touching = Box(10, 10, 5, 5)
    apart = Box(11, 0, 5, 5)
    assert a.overlaps(touching) and touching.overlaps(a)
    assert not a.overlaps(apart) and not apart.overlaps(a)


def test_box_contained_overlaps():
    outer = Box(0, 0, 100, 100)
    inner = Box(40, 40, 2, 2)
    assert outer.overlaps(inner) and inner.overlaps(outer)


def test_aqua_placement_spacing(settings):
    a, b, c = (AquaAlien(settings, 20, 16) for _ in range(3))
    a.place(0, 1)
    b.place(1, 1)
    c.place(0, 2)
    assert b.x - a.x == settings.spacing
    assert c.y - a.y == settings.col_space
    assert a.state == AlienState.NORMAL and a.alive


def test_rows_are_stacked(settings):
    flag, red, purple = FlagShip(settings, 20, 16), RedAlien(settings, 20, 16), PurpleAlien(settings, 20, 16)
    flag.place(1)
    red.place(0)
    purple.place(0)
    assert flag.y < red.y < purple.y
    assert flag.x == settings.flag_start2


def test_normal_move_waits_for_pause(settings):
    alien = RedAlien(settings, 20, 16)
    alien.place(0)
    start = alien.x
    alien.move(3)
    assert alien.x == start
    alien.move(0)
    assert alien.x == start + settings.alien_speed


def test_reverse_twice_restores_direction(settings):
    alien = PurpleAlien(settings, 20, 16)
    dx = alien.dx
    alien.reverse()
    assert alien.dx == -dx
    alien.reverse()
    assert alien.dx == dx


def test_attack_remembers_formation_slot(settings):
    alien = PurpleAlien(settings, 20, 16)
    alien.place(2)
    x, y = alien.x, alien.y
    alien.attack()
    assert alien.state == AlienState.ATTACKING
    assert (alien.memory_x, alien.memory_y, alien.median) == (x, y, x)
    alien.attack()
    assert alien.memory_x == x


def test_attack_ignored_unless_normal(settings):
    alien = AquaAlien(settings, 20, 16)
    alien.die()
    alien.attack()
    assert alien.state == AlienState.DYING


def test_swoop_stays_near_median(settings):
    alien = RedAlien(settings, 20, 16)
    alien.place(0)
    alien.attack()
    for _ in range(50):
        alien.move(1)
        assert abs(alien.x - alien.median) <= RedAlien.AMPLITUDE
    assert alien.y > alien.memory_y


def test_attack_leaves_screen_and_returns(settings):
    alien = PurpleAlien(settings, 20, 16)
    alien.place(0)
    alien.attack()
    home_y = alien.memory_y
    for _ in range(10_000):
        alien.move(1)
        if alien.state == AlienState.RESETTING:
            break
    assert alien.state == AlienState.RESETTING
    assert alien.x == alien.memory_x
    for _ in range(10_000):
        alien.move(1)
        if alien.state == AlienState.NORMAL:
            break
    assert alien.state == AlienState.NORMAL
    assert alien.y == home_y
    assert alien.dy == 0


def test_aqua_reset_sets_descent_speed(settings):
    alien = AquaAlien(settings, 20, 16)
    alien.reset()
    assert alien.state == AlienState.RESETTING
    assert alien.y == 0
    assert alien.dy == settings.alien_speed // 2


def test_points_in_formation_and_attacking(settings):
    aqua = AquaAlien(settings, 20, 16)
    assert aqua.die() == 30
    attacker = AquaAlien(settings, 20, 16)
    attacker.attack()
    assert attacker.die() == 60
    flag = FlagShip(settings, 20, 16)
    flag.attack()
    assert flag.die() == 150
    assert not flag.alive and flag.state == AlienState.DYING


def test_dying_alien_scores_nothing_more(settings):
    red = RedAlien(settings, 20, 16)
    red.die()
    assert red.die() == 0


def test_draw_updates_box_and_skips_dying(settings):
    alien = RedAlien(settings, 20, 16)
    alien.place(1)
    surface = FakeSurface()
    alien.draw(surface, "img")
    assert surface.blits == [("img", (alien.x, alien.y))]
    assert (alien.box.x, alien.box.y) == (alien.x, alien.y)
    alien.die()
    alien.draw(surface, "img")
    assert len(surface.blits) == 1


def test_explosion_follows_dying_alien(settings):
    alien = AquaAlien(settings, 20, 16)
    alien.place(3, 1)
    alien.draw(FakeSurface(), "img")
    alien.die()
    explosion = Explosion()
    alien.update_explosion(explosion)
    assert explosion.alive
    assert (explosion.x, explosion.y) == (alien.drawn_x, alien.drawn_y)
    surface = FakeSurface()
    frames = list(range(LAST_FRAME + 1))
    while alien.state == AlienState.DYING:
        alien.update_explosion(explosion)
        explosion.draw(surface, frames)
    assert alien.state == AlienState.DEAD
    assert not explosion.alive


def test_flagship_follows_living_escort(settings):
    escorts = [RedAlien(settings, 20, 16) for _ in range(6)]
    for i, red in enumerate(escorts):
        red.place(i)
        red.draw(FakeSurface(), "img")
    escorts[0].alive = False
    flag = FlagShip(settings, 20, 16)
    flag.place(0)
    flag.attack()
    flag.move_with_escort(1, escorts, 0)
    assert flag.x == escorts[1].drawn_x
    escorts[3].alive = True
    flag2 = FlagShip(settings, 20, 16)
    flag2.place(1)
    flag2.attack()
    flag2.move_with_escort(1, escorts, 1)
    assert flag2.x == escorts[3].drawn_x + settings.spacing


def test_flagship_without_escort_swoops(settings):
    escorts = [RedAlien(settings, 20, 16) for _ in range(6)]
    for red in escorts:
        red.alive = False
    flag = FlagShip(settings, 20, 16)
    flag.place(0)
    flag.attack()
    for _ in range(30):
        flag.move_with_escort(1, escorts, 0)
        assert abs(flag.x - flag.median) <= FlagShip.AMPLITUDE
    assert flag.state == AlienState.ATTACKING