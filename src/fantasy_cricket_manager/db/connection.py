import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_MIGRATIONS_DIR = Path(__file__).parent / "migrations"


@dataclass(frozen=True)
class Migration:
    version: int
    name: str
    script: str


def create_connection(
    path: str | Path,
    *,
    migrations_dir: Path | None = None,
) -> sqlite3.Connection:
    """Open the game database, bringing its schema up to date."""
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    if str(path) != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL")
    # team_player rows cascade away with their team
    conn.execute("PRAGMA foreign_keys=ON")
    applied = apply_migrations(conn, discover_migrations(migrations_dir or _MIGRATIONS_DIR))
    logger.debug("Opened game database %s (%d migrations applied)", path, len(applied))
    return conn


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Highest applied migration version, 0 for a fresh database."""
    exists = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'schema_version'"
    ).fetchone()
    if exists is None:
        return 0
    (version,) = conn.execute("SELECT COALESCE(MAX(version), 0) FROM schema_version").fetchone()
    return version


def discover_migrations(migrations_dir: Path) -> list[Migration]:
    """Read ``NNN_name.sql`` files in version order.

    Raises ``ValueError`` when a file name has no numeric prefix or two files
    share a version.
    """
    migrations: dict[int, Migration] = {}
    for sql_file in migrations_dir.glob("*.sql"):
        prefix, _, name = sql_file.stem.partition("_")
        if not prefix.isdigit():
            raise ValueError(f"Migration file '{sql_file.name}' must start with a version number")
        version = int(prefix)
        if version in migrations:
            raise ValueError(f"Duplicate migration version {version}: '{sql_file.name}'")
        migrations[version] = Migration(version=version, name=name, script=sql_file.read_text())
    return [migrations[v] for v in sorted(migrations)]


def apply_migrations(conn: sqlite3.Connection, migrations: list[Migration]) -> list[int]:
    """Apply every migration newer than the current schema version.

    Each migration runs in its own transaction together with its
    ``schema_version`` row, so a failing script leaves the database at the
    previous version. Returns the versions applied.
    """
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_version ("
        " version INTEGER PRIMARY KEY,"
        " applied_at TEXT NOT NULL DEFAULT (datetime('now')))"
    )
    conn.commit()

    current = get_schema_version(conn)
    applied: list[int] = []
    for migration in migrations:
        if migration.version <= current:
            continue
        try:
            conn.executescript(
                f"BEGIN;\n{migration.script}\n;\n"
                f"INSERT INTO schema_version (version) VALUES ({migration.version:d});\nCOMMIT;"
            )
        except sqlite3.Error:
            if conn.in_transaction:
                conn.rollback()
            logger.error(
                "Migration %03d_%s failed; schema left at version %d", migration.version, migration.name, current
            )
            raise
        logger.info("Applied migration %03d_%s", migration.version, migration.name)
        applied.append(migration.version)
        current = migration.version
    return applied
