import sqlite3

from fantasy_cricket_manager.domain.player import Country, Player


class SqlitePlayerRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, player: Player) -> None:
        self._conn.execute(
            """INSERT INTO player (id, name, country, price, points)
               VALUES (?, ?, ?, ?, ?)
               ON CONFLICT(id) DO UPDATE SET
                   name=excluded.name, country=excluded.country,
                   price=excluded.price, points=excluded.points""",
            (player.id, player.name, player.country.value, player.price, player.points),
        )
        self._conn.commit()

    def get(self, player_id: str) -> Player | None:
        row = self._conn.execute("SELECT * FROM player WHERE id = ?", (player_id,)).fetchone()
        return self._row_to_player(row) if row else None

    def all(self) -> list[Player]:
        rows = self._conn.execute("SELECT * FROM player ORDER BY country, name").fetchall()
        return [self._row_to_player(row) for row in rows]

    @staticmethod
    def _row_to_player(row: sqlite3.Row) -> Player:
        return Player(
            id=row["id"],
            name=row["name"],
            country=Country(row["country"]),
            price=row["price"],
            points=row["points"],
        )
