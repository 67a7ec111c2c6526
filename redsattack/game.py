"""One game from first wave to last life: session logic, drawing and high scores."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from pathlib import Path
from typing import Any, Mapping, Optional
import random

import pygame

from redsattack.aliens import Alien, AquaAlien, FlagShip, PurpleAlien, RedAlien
from redsattack.explosion import FRAME_FILES, Explosion
from redsattack.fleet import Fleet, Formation
from redsattack.lasers import AlienLaser, PlayerLaser
from redsattack.player import PLAYER_IMAGE, LifeIcon, Player, PlayerState
from redsattack.settings import Settings

ALIEN_TYPES = (AquaAlien, PurpleAlien, RedAlien, FlagShip)
IMAGE_FILES = tuple(kind.IMAGE for kind in ALIEN_TYPES) + (PLAYER_IMAGE,) + FRAME_FILES
FIRE_SOUND = "laser.wav"
EXPLOSION_SOUND = "explosion.wav"
SOUND_FILES = (FIRE_SOUND, EXPLOSION_SOUND)
GAME_MUSIC = "AmericaFYeah.wav"
HUD_FONT = ("FreeMonoBold.ttf", 15)
WARNING_FONT = ("MarsAttacks.ttf", 75)
WARNING_TEXT = "Attention: Next Wave Incoming!"

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)

BONUS_SCORE = 5000
START_LASER_DELAY = 20
FIRE_DELAY = 40
RESPAWN_DELAY = 50
HIGH_SCORE_COUNT = 3


@dataclass
class HighScores:
    """The three best scores, highest first."""

    scores: tuple[int, ...] = (0,) * HIGH_SCORE_COUNT

    @property
    def best(self) -> int:
        return self.scores[0]

    @classmethod
    def load(cls, path: str | Path) -> HighScores:
        """Read the scores from a file; a missing file gives all zeros."""
        path = Path(path)
        if not path.exists():
            return cls()
        words = path.read_text().split()[:HIGH_SCORE_COUNT]
        try:
            values = [int(word) for word in words]
        except ValueError as exc:
            raise ValueError(f"malformed high score file {path}: {exc}") from exc
        values += [0] * (HIGH_SCORE_COUNT - len(values))
        return cls(tuple(values))

    def record(self, score: int) -> Optional[int]:
        """Insert a score if it makes the table; return its rank or None."""
        for rank, existing in enumerate(self.scores):
            if score >= existing:
                updated = list(self.scores)
                updated.insert(rank, score)
                self.scores = tuple(updated[:HIGH_SCORE_COUNT])
                return rank
        return None

    def save(self, path: str | Path) -> None:
        """Write the scores one per line."""
        Path(path).write_text("".join(f"{score}\n" for score in self.scores))


@dataclass(frozen=True)
class Controls:
    """The keys held down during one frame."""

    left: bool = False
    right: bool = False
    fire: bool = False
    quit: bool = False


@dataclass
class Assets:
    """Images, sounds and fonts loaded from the game's data directory."""

    root: Path
    images: dict[str, Any]
    sounds: dict[str, Any] = field(default_factory=dict)
    _fonts: dict[tuple[str, int], Any] = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, root: str | Path) -> Assets:
        """Load every image, and the sounds when audio is available."""
        root = Path(root)
        image_paths = {name: root / "images" / "galaxian" / name for name in IMAGE_FILES}
        sound_paths = {name: root / "sounds" / name for name in SOUND_FILES}
        for path in chain(image_paths.values(), sound_paths.values()):
            if not path.is_file():
                raise FileNotFoundError(path)
        images = {name: pygame.image.load(str(path)) for name, path in image_paths.items()}
        sounds = {}
        if pygame.mixer.get_init() is not None:
            sounds = {name: pygame.mixer.Sound(str(path)) for name, path in sound_paths.items()}
        return cls(root=root, images=images, sounds=sounds)

    @property
    def explosion_frames(self) -> list[Any]:
        return [self.images[name] for name in FRAME_FILES]

    @property
    def player_size(self) -> tuple[int, int]:
        return tuple(self.images[PLAYER_IMAGE].get_size())

    def sizes(self) -> dict[type, tuple[int, int]]:
        """Image size of each alien class."""
        return {kind: tuple(self.images[kind.IMAGE].get_size()) for kind in ALIEN_TYPES}

    def font(self, name: str, size: int) -> Any:
        key = (name, size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.Font(str(self.root / "fonts" / name), size)
        return self._fonts[key]

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()

    def play_music(self, name: str) -> None:
        if pygame.mixer.get_init() is None:
            return
        pygame.mixer.music.load(str(self.root / "sounds" / name))
        pygame.mixer.music.play(-1)


class GameSession:
    """The state of a game in progress, advanced one frame at a time."""

    def __init__(self, settings: Settings, sizes: Mapping[type, tuple[int, int]],
                 player_size: tuple[int, int], rng: Optional[random.Random] = None,
                 best: int = 0):
        self.settings = settings
        self.player = Player(settings, *player_size)
        self.formation = Formation.create(settings, sizes)
        self.fleet = Fleet(settings, rng)
        self.fleet.place(self.formation)
        self.player_lasers = [PlayerLaser(settings) for _ in range(settings.player_lasers)]
        self.explosions = {alien: Explosion() for alien in self.formation.all_aliens()}
        self.player_explosion = Explosion()
        self.score = 0
        self.best = best
        self.laser_delay = START_LASER_DELAY
        self.respawn_timer = RESPAWN_DELAY
        self.bonus_available = True

    @property
    def over(self) -> bool:
        return self.player.lives <= 0

    def _alien_lasers(self) -> list[AlienLaser]:
        f = self.formation
        return list(chain(*f.aqua_lasers, f.purple_lasers, f.red_lasers, f.flag_lasers))

    def _armed(self) -> list[tuple[Alien, AlienLaser]]:
        return list(zip(self.formation.all_aliens(), self._alien_lasers()))

    def _targets(self) -> list[Alien]:
        f = self.formation
        return list(chain(chain.from_iterable(zip(*f.aqua_rows)), f.purple, f.red, f.flags))

    def step(self, controls: Controls) -> list[str]:
        """Advance one frame; return the names of the sounds to play."""
        sounds: list[str] = []
        player = self.player
        settings = self.settings

        if self.score >= BONUS_SCORE and self.bonus_available:
            player.bonus_life()
            self.bonus_available = False
        if player.state == PlayerState.INVINCIBLE:
            player.tick_invincibility()

        if controls.fire and self.laser_delay == 0 and not self.fleet.respawning:
            laser = next((shot for shot in self.player_lasers if not shot.alive), None)
            if laser is not None:
                sounds.append(FIRE_SOUND)
                laser.fire(player)
                self.laser_delay = FIRE_DELAY

        if player.x > 0 and controls.left:
            player.move_left()
        elif player.x < settings.width - player.width and controls.right:
            player.move_right()
        else:
            player.stop()

        if self.laser_delay > 0:
            self.laser_delay -= 1
        for laser in self.player_lasers:
            laser.advance()

        self.fleet.change_direction(self.formation)
        self.fleet.attack(self.formation)
        self.fleet.move(self.formation, lambda: sounds.append(FIRE_SOUND))

        for laser in self._alien_lasers():
            laser.hit_player(player)
        targets = self._targets()
        for laser in self.player_lasers:
            self.score += laser.hit_aliens(targets)
        self.score += self.fleet.collide_player(player, self.formation)
        self.fleet.check_respawn(self.formation)

        if player.state != PlayerState.NORMAL and self.respawn_timer > 0:
            self.respawn_timer -= 1
        elif player.state == PlayerState.RESPAWNING and self.respawn_timer == 0:
            self.respawn_timer = RESPAWN_DELAY
            player.respawn()
        return sounds

    def draw(self, surface: Any, assets: Any) -> None:
        """Render the playfield and the score display."""
        settings = self.settings
        frames = assets.explosion_frames
        boom = assets.sounds.get(EXPLOSION_SOUND)
        surface.fill(BLACK)

        for laser in self.player_lasers:
            laser.draw(surface)
        for alien, laser in self._armed():
            explosion = self.explosions[alien]
            alien.draw(surface, assets.images[alien.IMAGE])
            alien.update_explosion(explosion)
            laser.draw(surface)
            explosion.draw(surface, frames, boom)

        player_image = assets.images[PLAYER_IMAGE]
        self.player.draw(surface, player_image)
        self.player.update_explosion(self.player_explosion)
        self.player_explosion.draw(surface, frames, boom)

        hud = assets.font(*HUD_FONT)
        surface.blit(hud.render(f"Score: {self.score}", True, WHITE), (2, 0))
        heading = hud.render("High Score", True, RED)
        surface.blit(heading, (settings.width // 2 - heading.get_width() // 2, 0))
        best = hud.render(str(max(self.score, self.best)), True, WHITE)
        surface.blit(best, (settings.width // 2 - best.get_width() // 2,
                            heading.get_height() // 2 + 2))
        stage = hud.render(f"Stage: {self.fleet.level}", True, WHITE)
        surface.blit(stage, (settings.width - stage.get_width(),
                             settings.height - stage.get_height()))

        if self.fleet.respawning:
            warning = assets.font(*WARNING_FONT).render(WARNING_TEXT, True, RED)
            surface.blit(warning, (settings.width // 2 - warning.get_width() // 2,
                                   settings.height // 2 - warning.get_height()))

        for index in range(self.player.lives - 1):
            LifeIcon(settings, index, self.player.width,
                     self.player.height).draw(surface, player_image)


def _read_controls() -> Controls:
    quit_requested = any(event.type == pygame.QUIT for event in pygame.event.get())
    keys = pygame.key.get_pressed()
    return Controls(left=bool(keys[pygame.K_LEFT]), right=bool(keys[pygame.K_RIGHT]),
                    fire=bool(keys[pygame.K_SPACE]), quit=quit_requested)


def run_game(screen: Any, assets: Assets, settings: Settings,
             score_path: str | Path) -> tuple[HighScores, bool]:
    """Play until the last life is lost; return the updated scores and whether to quit."""
    scores = HighScores.load(score_path)
    session = GameSession(settings, assets.sizes(), assets.player_size, best=scores.best)
    assets.play_music(GAME_MUSIC)
    quit_requested = False
    while not session.over:
        controls = _read_controls()
        if controls.quit:
            quit_requested = True
            break
        for name in session.step(controls):
            assets.play(name)
        session.draw(screen, assets)
        pygame.display.flip()
        pygame.time.delay(settings.frame_delay_ms)
    scores.record(session.score)
    scores.save(score_path)
    return scores, quit_requested