import sqlite3


class SqliteUserRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, user_id: str, name: str) -> None:
        self._conn.execute(
            "INSERT INTO app_user (id, name) VALUES (?, ?) ON CONFLICT(id) DO UPDATE SET name=excluded.name",
            (user_id, name),
        )
        self._conn.commit()

    def names_by_id(self) -> dict[str, str]:
        return {row["id"]: row["name"] for row in self._conn.execute("SELECT id, name FROM app_user")}
