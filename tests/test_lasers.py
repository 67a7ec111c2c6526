import pytest

from redsattack.aliens import AlienState, AquaAlien, RedAlien
from redsattack.lasers import (
    ALIEN_LASER_COLOR,
    PLAYER_LASER_COLOR,
    AlienLaser,
    PlayerLaser,
)
from redsattack.player import Player, PlayerState
from redsattack.settings import Settings


class FakeSurface:
    def __init__(self):
        self.fills = []

    def fill(self, color, rect):
        self.fills.append((color, rect))


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def player(settings):
    return Player(settings, 30, 20)


def _alien_at(cls, settings, x, y, state=AlienState.NORMAL):
    alien = cls(settings, 30, 20)
    alien.x = alien.drawn_x = x
    alien.y = alien.drawn_y = y
    alien.state = state
    return alien


def test_player_laser_fires_from_ship_centre(settings, player):
    laser = PlayerLaser(settings)
    laser.fire(player)
    assert laser.alive
    centre_laser = laser.x + laser.width / 2
    centre_ship = player.x + player.width / 2
    assert abs(centre_laser - centre_ship) <= 1
    assert 0 < laser.y < settings.height


def test_player_laser_does_not_refire_in_flight(settings, player):
    laser = PlayerLaser(settings)
    laser.fire(player)
    laser.advance()
    position = (laser.x, laser.y)
    player.move_left()
    laser.fire(player)
    assert (laser.x, laser.y) == position


def test_player_laser_rises_and_expires(settings, player):
    laser = PlayerLaser(settings)
    laser.fire(player)
    start = laser.y
    laser.advance()
    assert laser.y == start - settings.player_laser_speed
    for _ in range(settings.height):
        laser.advance()
        if not laser.alive:
            break
    assert not laser.alive
    assert laser.y <= 0


def test_player_laser_hits_alien(settings):
    laser = PlayerLaser(settings)
    laser.alive = True
    laser.x, laser.y = 210, 210
    alien = _alien_at(AquaAlien, settings, 200, 200)
    assert laser.hit_aliens([alien]) == settings.aqua_score
    assert alien.state == AlienState.DYING
    assert not laser.alive


def test_player_laser_hits_only_one(settings):
    laser = PlayerLaser(settings)
    laser.alive = True
    laser.x, laser.y = 210, 210
    first = _alien_at(RedAlien, settings, 200, 200)
    second = _alien_at(AquaAlien, settings, 205, 205)
    assert laser.hit_aliens([first, second]) == settings.red_score
    assert second.state == AlienState.NORMAL


def test_player_laser_skips_dying_and_distant(settings):
    laser = PlayerLaser(settings)
    laser.alive = True
    laser.x, laser.y = 210, 210
    dying = _alien_at(AquaAlien, settings, 200, 200, AlienState.DYING)
    far = _alien_at(AquaAlien, settings, 600, 50)
    assert laser.hit_aliens([dying, far]) == 0
    assert laser.alive
    assert far.state == AlienState.NORMAL


def test_player_laser_draw(settings, player):
    laser = PlayerLaser(settings)
    surface = FakeSurface()
    laser.draw(surface)
    assert surface.fills == []
    laser.fire(player)
    laser.draw(surface)
    assert surface.fills == [
        (PLAYER_LASER_COLOR, (laser.x, laser.y, laser.width, laser.height))
    ]


def test_alien_laser_fires_from_attacker_on_line(settings):
    laser = AlienLaser(settings)
    alien = _alien_at(AquaAlien, settings, 300, settings.fire_y, AlienState.ATTACKING)
    assert laser.watch(alien)
    assert laser.alive
    assert laser.y == alien.drawn_y + alien.height
    assert abs((laser.x + laser.width / 2) - (alien.drawn_x + alien.width / 2)) <= 1
    assert not laser.watch(alien)


def test_alien_laser_ignores_formation_and_off_line(settings):
    laser = AlienLaser(settings)
    resting = _alien_at(AquaAlien, settings, 300, settings.fire_y)
    high = _alien_at(AquaAlien, settings, 300, settings.fire_y - 1, AlienState.ATTACKING)
    assert not laser.watch(resting)
    assert not laser.watch(high)
    assert not laser.alive


def test_alien_laser_falls_and_expires(settings):
    laser = AlienLaser(settings)
    laser.alive = True
    laser.y = settings.height - 1
    laser.advance()
    assert laser.y == settings.height - 1 + settings.alien_laser_speed
    laser.advance()
    assert not laser.alive
    assert laser.y == 0


def test_alien_laser_hits_player(settings, player):
    laser = AlienLaser(settings)
    laser.alive = True
    laser.x, laser.y = player.x + 2, player.y + 2
    assert laser.hit_player(player)
    assert player.state == PlayerState.EXPLODING
    assert not laser.alive
    assert laser.y == 0


def test_alien_laser_spares_invincible_player(settings, player):
    laser = AlienLaser(settings)
    player.respawn()
    laser.alive = True
    laser.x, laser.y = player.x + 2, player.y + 2
    assert not laser.hit_player(player)
    assert player.state == PlayerState.INVINCIBLE
    assert laser.alive


def test_alien_laser_misses_distant_player(settings, player):
    laser = AlienLaser(settings)
    laser.alive = True
    laser.x, laser.y = player.x, 0
    assert not laser.hit_player(player)
    assert player.state == PlayerState.NORMAL


def test_alien_laser_draw(settings):
    laser = AlienLaser(settings)
    surface = FakeSurface()
    laser.alive = True
    laser.x, laser.y = 40, 60
    laser.draw(surface)
    laser.alive = False
    laser.draw(surface)
    assert surface.fills == [(ALIEN_LASER_COLOR, (40, 60, laser.width, laser.height))]