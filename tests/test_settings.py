import dataclasses

import pytest

from redsattack.settings import Settings


def test_scores_match_menu_values():
    s = Settings()
    assert (s.aqua_score, s.purple_score, s.red_score, s.flag_score) == (30, 40, 50, 60)


def test_scaled_to_same_size_is_identity():
    s = Settings()
    assert s.scaled(s.width, s.height) == s


def test_scaled_double_width_doubles_horizontal_positions():
    s = Settings()
    big = s.scaled(s.width * 2, s.height)
    assert big.spacing == s.spacing * 2
    assert big.flag_start2 == s.flag_start2 * 2
    assert big.col_space == s.col_space
    assert big.width == s.width * 2


def test_scaled_height_changes_vertical_positions():
    s = Settings()
    tall = s.scaled(s.width, s.height * 2)
    assert tall.fire_y == s.fire_y * 2
    assert tall.spacing == s.spacing


def test_scaled_rejects_non_positive():
    with pytest.raises(ValueError):
        Settings().scaled(0, 100)


def test_invalid_settings_rejected():
    with pytest.raises(ValueError):
        Settings(width=-1)
    with pytest.raises(ValueError):
        Settings(num_aqua=2, num_purple=8)
    with pytest.raises(TypeError):
        Settings(width=1.5)


def test_settings_are_frozen():
    s = Settings()
    original_width = s.width
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.width = 5
    assert s.width == original_width
    assert s == Settings()