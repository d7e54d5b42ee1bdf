from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from fantasy_cricket_manager.config import GameConfigError, create_config, load_game_rules, load_game_settings
from fantasy_cricket_manager.domain.game_settings import GameRules, GameSettings

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all CRICKET__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("CRICKET__"):
            monkeypatch.delenv(key)


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/fcm.yaml")
    assert isinstance(cfg, ConfigurationSet)
    assert load_game_settings(cfg) == GameSettings()
    assert load_game_rules(cfg) == GameRules()


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "fcm.yaml"
    yaml_file.write_text("settings:\n  leaderboard_public: true\nrules:\n  budget_ceiling: 120\n")
    cfg = create_config(yaml_path=str(yaml_file))
    assert load_game_settings(cfg).leaderboard_public is True
    assert load_game_rules(cfg).budget_ceiling == 120.0
    # Defaults still apply for unset keys
    assert load_game_settings(cfg).team_edit_enabled is True
    assert load_game_rules(cfg).roster_size == 11


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "fcm.yaml"
    yaml_file.write_text("settings:\n  team_edit_enabled: true\n")
    monkeypatch.setenv("CRICKET__SETTINGS__TEAM_EDIT_ENABLED", "false")
    cfg = create_config(yaml_path=str(yaml_file))
    assert load_game_settings(cfg).team_edit_enabled is False


def test_explicit_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRICKET__SETTINGS__TEAMS_PUBLIC", "false")
    cfg = create_config(yaml_path="/nonexistent/fcm.yaml", overrides={"settings": {"teams_public": True}})
    assert load_game_settings(cfg).teams_public is True


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("yes", True), ("On", True), ("0", False), ("no", False)])
def test_env_boolean_strings(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("CRICKET__SETTINGS__SIGNUP_ENABLED", raw)
    cfg = create_config(yaml_path="/nonexistent/fcm.yaml")
    assert load_game_settings(cfg).signup_enabled is expected


def test_invalid_boolean_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRICKET__SETTINGS__LOGIN_ENABLED", "sometimes")
    cfg = create_config(yaml_path="/nonexistent/fcm.yaml")
    with pytest.raises(GameConfigError, match="settings.login_enabled"):
        load_game_settings(cfg)


def test_invalid_number_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRICKET__RULES__BUDGET_CEILING", "lots")
    cfg = create_config(yaml_path="/nonexistent/fcm.yaml")
    with pytest.raises(GameConfigError, match="rules.budget_ceiling"):
        load_game_rules(cfg)


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
def test_non_finite_number_raises(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("CRICKET__RULES__BUDGET_CEILING", raw)
    cfg = create_config(yaml_path="/nonexistent/fcm.yaml")
    with pytest.raises(GameConfigError, match="finite"):
        load_game_rules(cfg)


def test_non_positive_roster_size_raises() -> None:
    cfg = create_config(yaml_path="/nonexistent/fcm.yaml", overrides={"rules": {"roster_size": 0}})
    with pytest.raises(GameConfigError, match="roster_size"):
        load_game_rules(cfg)


def test_env_numbers_parsed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRICKET__RULES__ROSTER_SIZE", "5")
    monkeypatch.setenv("CRICKET__RULES__CAPTAIN_MULTIPLIER", "3")
    rules = load_game_rules(create_config(yaml_path="/nonexistent/fcm.yaml"))
    assert rules.roster_size == 5
    assert rules.captain_multiplier == 3.0
