from __future__ import annotations

import math

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from fantasy_cricket_manager.domain.game_settings import GameRules, GameSettings

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


class GameConfigError(Exception):
    """Raised when a configuration value cannot be interpreted."""


_DEFAULTS: dict[str, object] = {
    "settings": {
        "signup_enabled": True,
        "login_enabled": True,
        "team_edit_enabled": True,
        "leaderboard_public": False,
        "teams_public": False,
    },
    "rules": {
        "budget_ceiling": 100.0,
        "roster_size": 11,
        "captain_multiplier": 2.0,
        "vice_captain_multiplier": 1.5,
    },
}


def create_config(
    yaml_path: str = "fcm.yaml",
    env_prefix: str = "CRICKET",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is skipped.
        env_prefix: Prefix for environment variables, e.g. ``CRICKET__SETTINGS__TEAM_EDIT_ENABLED``.
        defaults: Default configuration values.
        overrides: Values that win over every other layer.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _as_bool(key: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise GameConfigError(f"'{key}' must be a boolean, got {value!r}")


def _as_float(key: str, value: object) -> float:
    try:
        number = float(str(value))
    except ValueError:
        raise GameConfigError(f"'{key}' must be a number, got {value!r}")
    if not math.isfinite(number):
        raise GameConfigError(f"'{key}' must be a finite number, got {value!r}")
    return number


def _as_int(key: str, value: object) -> int:
    try:
        return int(str(value))
    except ValueError:
        raise GameConfigError(f"'{key}' must be an integer, got {value!r}")


def load_game_settings(cfg: ConfigurationSet | None = None) -> GameSettings:
    if cfg is None:
        cfg = create_config()
    return GameSettings(
        signup_enabled=_as_bool("settings.signup_enabled", cfg["settings.signup_enabled"]),
        login_enabled=_as_bool("settings.login_enabled", cfg["settings.login_enabled"]),
        team_edit_enabled=_as_bool("settings.team_edit_enabled", cfg["settings.team_edit_enabled"]),
        leaderboard_public=_as_bool("settings.leaderboard_public", cfg["settings.leaderboard_public"]),
        teams_public=_as_bool("settings.teams_public", cfg["settings.teams_public"]),
    )


def load_game_rules(cfg: ConfigurationSet | None = None) -> GameRules:
    if cfg is None:
        cfg = create_config()
    rules = GameRules(
        budget_ceiling=_as_float("rules.budget_ceiling", cfg["rules.budget_ceiling"]),
        roster_size=_as_int("rules.roster_size", cfg["rules.roster_size"]),
        captain_multiplier=_as_float("rules.captain_multiplier", cfg["rules.captain_multiplier"]),
        vice_captain_multiplier=_as_float("rules.vice_captain_multiplier", cfg["rules.vice_captain_multiplier"]),
    )
    if rules.budget_ceiling < 0:
        raise GameConfigError(f"'rules.budget_ceiling' must be >= 0, got {rules.budget_ceiling}")
    if rules.roster_size <= 0:
        raise GameConfigError(f"'rules.roster_size' must be > 0, got {rules.roster_size}")
    return rules
