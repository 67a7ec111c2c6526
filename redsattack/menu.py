"""Title screen: fading title, sliding score table and the Play/Quit choice."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

import pygame

from redsattack.aliens import AquaAlien, FlagShip, PurpleAlien, RedAlien
from redsattack.game import BLACK, RED, Assets
from redsattack.settings import Settings

MENU_MUSIC = "StarSpangledBanner.wav"
TITLE_FONT = ("MarsAttacks.ttf", 150)
OPTION_FONT = ("Astron.ttf", 40)
PROMPT_FONT = ("FreeMonoBold.ttf", 30)
TABLE_FONT = ("FreeMonoBold.ttf", 15)
TITLE_LINES = ("ATTACK OF", "THE REDS")
PLAY_LABEL = "[Play]"
QUIT_LABEL = "[Quit]"
PROMPT_TEXT = "Press SPACE!"

ORANGE = (255, 165, 0)
BLUE = (0, 0, 255)
MAGENTA = (255, 0, 255)
YELLOW = (255, 255, 0)

MENU_ALIENS = (AquaAlien, PurpleAlien, RedAlien, FlagShip)
TABLE_COLORS = (BLUE, MAGENTA, RED, YELLOW)

START_CHANGE_DELAY = 50
TOGGLE_DELAY = 20
BLINK_PERIOD = 200
BLINK_VISIBLE = 100
MAX_FADE = 255
SLIDE_DX = -5
OPTION_GAP = 30


class MenuChoice(Enum):
    PLAY = 0
    QUIT = 1


class MainMenu:
    """State of the title screen, advanced one frame at a time."""

    def __init__(self, settings: Settings, sizes: Mapping[type, tuple[int, int]]):
        self.settings = settings
        self.sizes = [tuple(sizes[kind]) for kind in MENU_ALIENS]
        self.option = MenuChoice.PLAY
        self.change_delay = START_CHANGE_DELAY
        self.blink_delay = BLINK_PERIOD
        self.title_fade = 0
        self.sending = 0
        self.alien_x = [settings.width] * len(MENU_ALIENS)
        self.alien_y: list[int] = []
        y = 0
        for index, (_, height) in enumerate(self.sizes):
            if index:
                y += height * 2
            self.alien_y.append(y)
        self.revealed = [False] * len(MENU_ALIENS)

    @property
    def prompt_visible(self) -> bool:
        """Whether the blinking prompt is showing this frame."""
        return self.blink_delay > BLINK_VISIBLE

    def table_labels(self) -> list[str]:
        """Score-table lines: points in formation, then points while attacking."""
        s = self.settings
        return [
            f"= {s.aqua_score}......{s.aqua_score * 2}",
            f"= {s.purple_score}......{s.purple_score * 2}",
            f"= {s.red_score}......{s.red_score * 2}",
            f"= {s.flag_score}......{s.flag_score * 2 + s.flag_score // 2}",
        ]

    def slide_aliens(self) -> None:
        """Slide the current alien leftwards, revealing its score when it arrives."""
        index = self.sending
        if self.alien_x[index] > -SLIDE_DX * 2:
            self.alien_x[index] += SLIDE_DX
        else:
            self.revealed[index] = True
            if index < len(MENU_ALIENS) - 1:
                self.sending += 1

    def _act(self, space: bool, toggle: bool) -> Optional[MenuChoice]:
        if self.change_delay != 0:
            return None
        if space:
            return self.option
        if toggle:
            self.change_delay = TOGGLE_DELAY
            self.option = MenuChoice.QUIT if self.option is MenuChoice.PLAY else MenuChoice.PLAY
        return None

    def step(self, space: bool, toggle: bool) -> Optional[MenuChoice]:
        """Advance one frame; return the chosen option once one is confirmed."""
        if self.blink_delay > 0:
            self.blink_delay -= 1
        else:
            self.blink_delay = BLINK_PERIOD
        self.slide_aliens()
        choice = self._act(space, toggle)
        if choice is not None:
            return choice
        if self.change_delay > 0:
            self.change_delay -= 1
        if self.title_fade < MAX_FADE:
            self.title_fade += 1
        return None

    def draw(self, surface: Any, assets: Any) -> None:
        """Render the title screen."""
        s = self.settings
        centre = s.width // 2
        surface.fill(BLACK)

        table = assets.font(*TABLE_FONT)
        for (width, _), y, shown, label, color in zip(
                self.sizes, self.alien_y, self.revealed, self.table_labels(), TABLE_COLORS):
            if shown:
                surface.blit(table.render(label, True, color), (width * 2, y))

        title_font = assets.font(*TITLE_FONT)
        fade = (self.title_fade, 0, 0)
        first, second = (title_font.render(line, True, fade) for line in TITLE_LINES)
        first_y = s.height // 2 - first.get_height()
        second_y = s.height // 2 - second.get_height() + first.get_height()
        surface.blit(first, (centre - first.get_width() // 2, first_y))
        surface.blit(second, (centre - second.get_width() // 2, second_y))

        option_font = assets.font(*OPTION_FONT)
        play_color = ORANGE if self.option is MenuChoice.PLAY else RED
        quit_color = ORANGE if self.option is MenuChoice.QUIT else RED
        play = option_font.render(PLAY_LABEL, True, play_color)
        quit_ = option_font.render(QUIT_LABEL, True, quit_color)
        play_y = second_y + play.get_height() + OPTION_GAP
        surface.blit(play, (centre - play.get_width() // 2, play_y))
        surface.blit(quit_, (centre - quit_.get_width() // 2, play_y + quit_.get_height()))

        if self.prompt_visible:
            prompt = assets.font(*PROMPT_FONT).render(PROMPT_TEXT, True, RED)
            surface.blit(prompt, (centre - prompt.get_width() // 2,
                                  s.height - prompt.get_height() * 2))

        for kind, x, y in zip(MENU_ALIENS, self.alien_x, self.alien_y):
            surface.blit(assets.images[kind.IMAGE], (x, y))


def run_menu(screen: Any, assets: Assets, settings: Settings) -> MenuChoice:
    """Show the title screen until the player chooses to play or quit."""
    menu = MainMenu(settings, assets.sizes())
    assets.play_music(MENU_MUSIC)
    while True:
        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            return MenuChoice.QUIT
        keys = pygame.key.get_pressed()
        toggle = bool(keys[pygame.K_UP] or keys[pygame.K_DOWN])
        choice = menu.step(bool(keys[pygame.K_SPACE]), toggle)
        if choice is not None:
            return choice
        menu.draw(screen, assets)
        pygame.display.flip()
        pygame.time.delay(settings.frame_delay_ms)