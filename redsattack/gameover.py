"""Game-over screen listing the high scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import pygame

from redsattack.game import BLACK, RED, WHITE, Assets, HighScores
from redsattack.settings import Settings

GAME_OVER_MUSIC = "USSR.wav"
TITLE_FONT = ("MarsAttacks.ttf", 150)
SCORE_FONT = ("FreeMonoBold.ttf", 15)
PROMPT_FONT = ("FreeMonoBold.ttf", 30)
TITLE_TEXT = "Game Over"
HEADING_TEXT = "High Scores"
PROMPT_TEXT = "Press SPACE to continue"

BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
SCORE_COLORS = (RED, WHITE, BLUE)
HEADING_OFFSET = 5
START_DELAY = 300

Size = tuple[int, int]
Point = tuple[int, int]


@dataclass(frozen=True)
class Layout:
    """Top-left positions of everything on the game-over screen."""

    title: Point
    press: Point
    heading: Point
    scores: tuple[Point, ...]


class GameOverScreen:
    """State of the game-over screen, advanced one frame at a time."""

    def __init__(self, settings: Settings, scores: HighScores):
        self.settings = settings
        self.scores = scores
        self.change_delay = START_DELAY

    @property
    def prompt_visible(self) -> bool:
        return self.change_delay == 0

    def step(self, space: bool) -> bool:
        """Advance one frame; True once space is pressed after the delay."""
        if space and self.change_delay == 0:
            return True
        if self.change_delay > 0:
            self.change_delay -= 1
        return False

    def layout(self, title: Size, press: Size, heading: Size,
               scores: Sequence[Size]) -> Layout:
        """Place items of the given (width, height) sizes on the screen."""
        s = self.settings
        centre = s.width // 2

        def centred(size: Size, y: int) -> Point:
            return (centre - size[0] // 2, y)

        title_pos = centred(title, s.height // 2 - title[1])
        press_pos = centred(press, s.height - press[1] * 2)
        heading_pos = centred(heading, title_pos[1] + heading[1] * HEADING_OFFSET)
        score_pos = []
        y = heading_pos[1]
        for size in scores:
            y += size[1]
            score_pos.append(centred(size, y))
        return Layout(title_pos, press_pos, heading_pos, tuple(score_pos))

    def draw(self, surface: Any, assets: Any) -> None:
        """Render the game-over screen."""
        surface.fill(BLACK)
        score_font = assets.font(*SCORE_FONT)
        title = assets.font(*TITLE_FONT).render(TITLE_TEXT, True, RED)
        press = assets.font(*PROMPT_FONT).render(PROMPT_TEXT, True, RED)
        heading = score_font.render(HEADING_TEXT, True, YELLOW)
        lines = [score_font.render(str(score), True, color)
                 for score, color in zip(self.scores.scores, SCORE_COLORS)]
        placed = self.layout(title.get_size(), press.get_size(), heading.get_size(),
                             [line.get_size() for line in lines])
        surface.blit(title, placed.title)
        surface.blit(heading, placed.heading)
        for line, pos in zip(lines, placed.scores):
            surface.blit(line, pos)
        if self.prompt_visible:
            surface.blit(press, placed.press)


def run_game_over(screen: Any, assets: Assets, settings: Settings,
                  scores: HighScores) -> bool:
    """Show the game-over screen; return True if the window was closed."""
    over = GameOverScreen(settings, scores)
    assets.play_music(GAME_OVER_MUSIC)
    while True:
        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            return True
        if over.step(bool(pygame.key.get_pressed()[pygame.K_SPACE])):
            return False
        over.draw(screen, assets)
        pygame.display.flip()
        pygame.time.delay(settings.frame_delay_ms)