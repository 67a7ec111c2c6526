"""Tunable dimensions, speeds and scores for the game."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

_HORIZONTAL = ("spacing", "purple_start", "red_start", "flag_start1", "flag_start2")
_VERTICAL = ("col_space", "fire_y")


@dataclass(frozen=True)
class Settings:
    """Every constant the game logic depends on."""

    width: int = 1000
    height: int = 700
    num_aqua: int = 10
    num_purple: int = 8
    num_red: int = 6
    num_flag: int = 2
    player_lasers: int = 3
    num_lives: int = 3
    alien_speed: int = 4
    player_speed: int = 4
    player_laser_speed: int = 10
    alien_laser_speed: int = 6
    spacing: int = 50
    col_space: int = 40
    purple_start: int = 50
    red_start: int = 100
    flag_start1: int = 350
    flag_start2: int = 550
    fire_y: int = 300
    aqua_score: int = 30
    purple_score: int = 40
    red_score: int = 50
    flag_score: int = 60
    frame_delay_ms: int = 20

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{field.name} must be an integer, got {value!r}")
        for name in ("width", "height", "num_aqua", "num_purple", "num_red",
                     "num_flag", "player_lasers", "num_lives"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.num_aqua < max(self.num_purple, self.num_red, self.num_flag,
                               self.player_lasers):
            raise ValueError("num_aqua must be the largest of the per-row counts")

    def scaled(self, width: int, height: int) -> Settings:
        """Return settings for another screen size, positions scaled to match."""
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        fx = width / self.width
        fy = height / self.height
        changes: dict[str, int] = {"width": width, "height": height}
        changes.update({name: round(getattr(self, name) * fx) for name in _HORIZONTAL})
        changes.update({name: round(getattr(self, name) * fy) for name in _VERTICAL})
        return replace(self, **changes)