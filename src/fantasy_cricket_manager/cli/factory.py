import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from fantasy_cricket_manager.config import create_config, load_game_rules, load_game_settings
from fantasy_cricket_manager.db.connection import create_connection
from fantasy_cricket_manager.domain.game_settings import GameRules, GameSettings
from fantasy_cricket_manager.repos.player_repo import SqlitePlayerRepo
from fantasy_cricket_manager.repos.team_repo import SqliteTeamRepo
from fantasy_cricket_manager.repos.user_repo import SqliteUserRepo


@dataclass(frozen=True)
class GameConfig:
    settings: GameSettings
    rules: GameRules


@dataclass(frozen=True)
class GameContext:
    conn: sqlite3.Connection
    player_repo: SqlitePlayerRepo
    team_repo: SqliteTeamRepo
    user_repo: SqliteUserRepo
    settings: GameSettings
    rules: GameRules


def load_game_config(config_path: str) -> GameConfig:
    """Read settings and rules once; raises GameConfigError on bad values."""
    cfg = create_config(yaml_path=config_path)
    return GameConfig(settings=load_game_settings(cfg), rules=load_game_rules(cfg))


@contextmanager
def build_game_context(db_path: str, game_config: GameConfig) -> Iterator[GameContext]:
    """Composition-root context manager: opens the DB, wires the repos, closes the DB on exit."""
    conn = create_connection(Path(db_path))
    try:
        yield GameContext(
            conn=conn,
            player_repo=SqlitePlayerRepo(conn),
            team_repo=SqliteTeamRepo(conn),
            user_repo=SqliteUserRepo(conn),
            settings=game_config.settings,
            rules=game_config.rules,
        )
    finally:
        conn.close()
