import sqlite3
from datetime import datetime

from fantasy_cricket_manager.domain.team import PlayerSelection, Team


class SqliteTeamRepo:
    """One team per user; ``put`` overwrites the user's previous team in place."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def put(self, team: Team) -> None:
        with self._conn:
            self._conn.execute(
                """INSERT INTO team (user_id, team_name, captain, vice_captain, updated_at)
                   VALUES (?, ?, ?, ?, ?)
                   ON CONFLICT(user_id) DO UPDATE SET
                       team_name=excluded.team_name, captain=excluded.captain,
                       vice_captain=excluded.vice_captain, updated_at=excluded.updated_at""",
                (
                    team.user_id,
                    team.team_name,
                    team.captain,
                    team.vice_captain,
                    team.updated_at.isoformat() if team.updated_at else None,
                ),
            )
            self._conn.execute("DELETE FROM team_player WHERE user_id = ?", (team.user_id,))
            self._conn.executemany(
                "INSERT INTO team_player (user_id, player_id, slot) VALUES (?, ?, ?)",
                [(team.user_id, s.player_id, slot) for slot, s in enumerate(team.players)],
            )

    def get(self, user_id: str) -> Team | None:
        row = self._conn.execute("SELECT * FROM team WHERE user_id = ?", (user_id,)).fetchone()
        return self._row_to_team(row) if row else None

    def all(self) -> list[Team]:
        # rowid survives the upsert, so teams come back in first-save order
        rows = self._conn.execute("SELECT * FROM team ORDER BY rowid").fetchall()
        return [self._row_to_team(row) for row in rows]

    def _row_to_team(self, row: sqlite3.Row) -> Team:
        player_rows = self._conn.execute(
            "SELECT player_id FROM team_player WHERE user_id = ? ORDER BY slot", (row["user_id"],)
        ).fetchall()
        return Team(
            user_id=row["user_id"],
            team_name=row["team_name"],
            players=tuple(PlayerSelection(player_id=r["player_id"]) for r in player_rows),
            captain=row["captain"],
            vice_captain=row["vice_captain"],
            updated_at=datetime.fromisoformat(row["updated_at"]) if row["updated_at"] else None,
        )
