import sqlite3
from pathlib import Path

import pytest

from fantasy_cricket_manager.cli.factory import build_game_context, load_game_config
from fantasy_cricket_manager.config import GameConfigError
from fantasy_cricket_manager.domain.game_settings import GameRules, GameSettings


class TestLoadGameConfig:
    def test_defaults_when_file_missing(self, tmp_path: Path) -> None:
        game_config = load_game_config(str(tmp_path / "missing.yaml"))
        assert game_config.settings == GameSettings()
        assert game_config.rules == GameRules()

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        config = tmp_path / "fcm.yaml"
        config.write_text("rules:\n  roster_size: eleven\n")
        with pytest.raises(GameConfigError):
            load_game_config(str(config))


class TestBuildGameContext:
    def test_wires_repos_and_closes(self, tmp_path: Path) -> None:
        game_config = load_game_config(str(tmp_path / "missing.yaml"))
        with build_game_context(str(tmp_path / "fcm.db"), game_config) as ctx:
            assert ctx.player_repo.all() == []
            assert ctx.team_repo.all() == []
            assert ctx.user_repo.names_by_id() == {}
            assert ctx.rules.roster_size == 11
            conn = ctx.conn
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")
