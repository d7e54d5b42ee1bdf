from pathlib import Path
from typing import Annotated, NoReturn

import typer

from fantasy_cricket_manager.catalog.admin import parse_admin_number, update_points, update_price
from fantasy_cricket_manager.catalog.initialize import initialize_catalog, load_seed
from fantasy_cricket_manager.catalog.lookup import filter_by_country, index_catalog
from fantasy_cricket_manager.cli._logging import configure_logging
from fantasy_cricket_manager.cli._output import (
    console,
    format_points,
    print_error,
    print_leaderboard,
    print_players,
    print_settings,
    print_team,
)
from fantasy_cricket_manager.cli.factory import GameConfig, build_game_context, load_game_config
from fantasy_cricket_manager.config import GameConfigError
from fantasy_cricket_manager.domain.result import Err, Ok
from fantasy_cricket_manager.domain.team import Role, Roster
from fantasy_cricket_manager.roster.builder import (
    check_budget,
    roster_from_team,
    set_role,
    toggle_selection,
    validate_for_save,
)
from fantasy_cricket_manager.scoring.engine import score_team
from fantasy_cricket_manager.scoring.leaderboard import find_user_rank
from fantasy_cricket_manager.services.team_service import build_leaderboard, load_roster, save_team, team_points

app = typer.Typer(name="fcm", help="Fantasy Cricket Manager — auction team scoring and leaderboard")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Fantasy Cricket Manager — auction team scoring and leaderboard."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_DbOpt = Annotated[str, typer.Option("--db", help="Path to the game database")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="Path to the YAML config file")]
_UserArg = Annotated[str, typer.Argument(help="User ID")]
_PlayerArg = Annotated[str, typer.Argument(help="Player ID")]


def _fail(message: str) -> NoReturn:
    print_error(message)
    raise typer.Exit(code=1)


def _config(path: str) -> GameConfig:
    try:
        return load_game_config(path)
    except GameConfigError as e:
        _fail(str(e))


@app.command()
def settings(config: _ConfigOpt = "fcm.yaml") -> None:
    """Show game settings and scoring rules."""
    game_config = _config(config)
    print_settings(game_config.settings, game_config.rules)


@app.command("init-catalog")
def init_catalog(
    seed: Annotated[Path, typer.Argument(help="YAML mapping of country to player names")],
    price: Annotated[float, typer.Option("--price", help="Opening price for every player")] = 5.0,
    db: _DbOpt = "fcm.db",
    config: _ConfigOpt = "fcm.yaml",
) -> None:
    """Create (or reset) catalog entries from a seed file."""
    try:
        players = initialize_catalog(load_seed(seed), price=price)
    except (OSError, ValueError) as e:
        _fail(str(e))
    with build_game_context(db, _config(config)) as ctx:
        for player in players:
            ctx.player_repo.upsert(player)
    console.print(f"[bold green]Initialized[/bold green] {len(players)} players")


@app.command("players")
def list_players(
    country: Annotated[str | None, typer.Option("--country", help="Only show this country")] = None,
    db: _DbOpt = "fcm.db",
    config: _ConfigOpt = "fcm.yaml",
) -> None:
    """List catalog players."""
    with build_game_context(db, _config(config)) as ctx:
        print_players(filter_by_country(ctx.player_repo.all(), country))


@app.command("set-price")
def set_price(player_id: _PlayerArg, value: str, db: _DbOpt = "fcm.db", config: _ConfigOpt = "fcm.yaml") -> None:
    """Set a player's price. Non-numeric input resets it to 0."""
    price = parse_admin_number(value)
    with build_game_context(db, _config(config)) as ctx:
        catalog = ctx.player_repo.all()
        if player_id not in index_catalog(catalog):
            _fail(f"No player with id '{player_id}'")
        try:
            updated = update_price(catalog, player_id, price)
        except ValueError as e:
            _fail(str(e))
        ctx.player_repo.upsert(index_catalog(updated)[player_id])
    console.print(f"[bold green]Price updated[/bold green] {player_id}: {price:g}")


@app.command("set-points")
def set_points(player_id: _PlayerArg, value: str, db: _DbOpt = "fcm.db", config: _ConfigOpt = "fcm.yaml") -> None:
    """Set a player's points. Team totals pick this up on the next read."""
    points = parse_admin_number(value)
    with build_game_context(db, _config(config)) as ctx:
        catalog = ctx.player_repo.all()
        if player_id not in index_catalog(catalog):
            _fail(f"No player with id '{player_id}'")
        ctx.player_repo.upsert(index_catalog(update_points(catalog, player_id, points))[player_id])
    console.print(f"[bold green]Points updated[/bold green] {player_id}: {points:g}")


@app.command("add-user")
def add_user(
    user_id: _UserArg,
    name: Annotated[str, typer.Argument(help="Display name")],
    db: _DbOpt = "fcm.db",
    config: _ConfigOpt = "fcm.yaml",
) -> None:
    """Add or rename a user in the directory."""
    with build_game_context(db, _config(config)) as ctx:
        ctx.user_repo.upsert(user_id, name)
    console.print(f"[bold green]Saved[/bold green] user {user_id}")


@app.command("save-team")
def save_team_command(
    user_id: _UserArg,
    team_name: Annotated[str, typer.Argument(help="Team name")],
    player: Annotated[list[str] | None, typer.Option("--player", "-p", help="Player ID (repeatable)")] = None,
    captain: Annotated[str | None, typer.Option("--captain", help="Captain player ID")] = None,
    vice_captain: Annotated[str | None, typer.Option("--vice-captain", help="Vice-captain player ID")] = None,
    db: _DbOpt = "fcm.db",
    config: _ConfigOpt = "fcm.yaml",
) -> None:
    """Build and save a team.

    With --player options the roster is built from scratch; without them the
    saved roster is reused, e.g. to change only the captain.
    """
    with build_game_context(db, _config(config)) as ctx:
        if not ctx.settings.team_edit_enabled:
            _fail("Team editing is currently disabled")

        catalog_by_id = index_catalog(ctx.player_repo.all())
        roster = Roster() if player else load_roster(ctx.team_repo, user_id)
        for player_id in player or []:
            if player_id not in catalog_by_id:
                _fail(f"No player with id '{player_id}'")
            toggled = toggle_selection(
                roster, catalog_by_id[player_id], catalog_by_id, ctx.rules.budget_ceiling, ctx.rules.roster_size
            )
            if isinstance(toggled, Err):
                _fail(toggled.error.message)
            roster = toggled.value

        for role, player_id in ((Role.CAPTAIN, captain), (Role.VICE_CAPTAIN, vice_captain)):
            if player_id is None:
                continue
            assigned = set_role(roster, player_id, role)
            if isinstance(assigned, Err):
                _fail(assigned.error.message)
            roster = assigned.value

        match save_team(
            ctx.team_repo,
            ctx.player_repo,
            roster,
            user_id,
            team_name,
            team_edit_enabled=ctx.settings.team_edit_enabled,
            rules=ctx.rules,
        ):
            case Ok(saved):
                console.print(f"[bold green]Team saved successfully![/bold green] {saved.team_name}")
            case Err(e):
                _fail(e.message)


@app.command()
def team(
    user_id: _UserArg,
    viewer: Annotated[str | None, typer.Option("--viewer", help="User ID of whoever is looking")] = None,
    admin: Annotated[bool, typer.Option("--admin", help="View as admin, ignoring visibility settings")] = False,
    db: _DbOpt = "fcm.db",
    config: _ConfigOpt = "fcm.yaml",
) -> None:
    """Show a user's team with per-player points."""
    with build_game_context(db, _config(config)) as ctx:
        own_team = viewer is None or viewer == user_id
        if not (own_team or admin or ctx.settings.teams_public):
            _fail("Other users' teams are not public yet")
        saved = ctx.team_repo.get(user_id)
        if saved is None:
            _fail(f"User '{user_id}' has not saved a team")
        catalog_by_id = index_catalog(ctx.player_repo.all())
        print_team(saved, catalog_by_id, score_team(saved, catalog_by_id, ctx.rules), ctx.rules)


@app.command()
def score(user_id: _UserArg, db: _DbOpt = "fcm.db", config: _ConfigOpt = "fcm.yaml") -> None:
    """Print a user's current team total."""
    with build_game_context(db, _config(config)) as ctx:
        points = team_points(ctx.team_repo, ctx.player_repo, user_id, ctx.rules)
    if points is None:
        _fail(f"User '{user_id}' has not saved a team")
    console.print(format_points(points))


@app.command()
def validate(user_id: _UserArg, db: _DbOpt = "fcm.db", config: _ConfigOpt = "fcm.yaml") -> None:
    """Check a saved team against the current catalog and rules."""
    with build_game_context(db, _config(config)) as ctx:
        saved = ctx.team_repo.get(user_id)
        if saved is None:
            _fail(f"User '{user_id}' has not saved a team")
        roster = roster_from_team(saved)
        budget = check_budget(roster, index_catalog(ctx.player_repo.all()), ctx.rules.budget_ceiling)
        if isinstance(budget, Err):
            _fail(budget.error.message)
        match validate_for_save(roster, user_id, saved.team_name, saved.updated_at, ctx.rules.roster_size):
            case Ok():
                console.print(f"[bold green]Valid[/bold green] team for {user_id}")
            case Err(e):
                _fail(e.message)


@app.command()
def leaderboard(
    user: Annotated[str | None, typer.Option("--user", help="Show this user's rank")] = None,
    admin: Annotated[bool, typer.Option("--admin", help="View as admin, ignoring visibility settings")] = False,
    db: _DbOpt = "fcm.db",
    config: _ConfigOpt = "fcm.yaml",
) -> None:
    """Rank every saved team by current points."""
    with build_game_context(db, _config(config)) as ctx:
        if not (admin or ctx.settings.leaderboard_public):
            _fail("The leaderboard is not public yet")
        entries = build_leaderboard(ctx.team_repo, ctx.player_repo, ctx.user_repo, ctx.rules)
    print_leaderboard(entries, user_rank=find_user_rank(entries, user) if user is not None else None)
