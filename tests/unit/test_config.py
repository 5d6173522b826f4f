"""Tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hexdice.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_match_default_rules(monkeypatch):
    monkeypatch.delenv("HEXDICE_NUMBER_OF_PLAYERS", raising=False)
    settings = Settings(_env_file=None)
    rules = settings.rules()

    assert settings.number_of_players == 2
    assert settings.seed is None
    assert rules.board.board_size == 20
    assert rules.board.patches_per_player == 16
    assert rules.board.dice_budget == 64
    assert rules.combat.die_sides == 6


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HEXDICE_NUMBER_OF_PLAYERS", "4")
    monkeypatch.setenv("HEXDICE_SEED", "77")
    monkeypatch.setenv("HEXDICE_MAX_PLACEMENT_ATTEMPTS", "250")

    settings = get_settings()

    assert settings.number_of_players == 4
    assert settings.seed == 77
    assert settings.rules().board.max_placement_attempts == 250
    assert get_settings() is settings


@pytest.mark.parametrize("players", [1, 9])
def test_player_count_is_validated(players):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, number_of_players=players)
