from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.table import Table

from fantasy_cricket_manager.domain.game_settings import GameRules, GameSettings
from fantasy_cricket_manager.domain.leaderboard import LeaderboardEntry, RankLookup, Ranked
from fantasy_cricket_manager.domain.player import Player
from fantasy_cricket_manager.domain.team import Roster, Team
from fantasy_cricket_manager.roster.builder import remaining_budget
from fantasy_cricket_manager.scoring.engine import role_multiplier

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def format_points(points: float) -> str:
    return f"{points:.1f}"


def format_rank(lookup: RankLookup) -> str:
    match lookup:
        case Ranked(position):
            return str(position)
        case _:
            return "-"


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_players(players: Sequence[Player]) -> None:
    if not players:
        console.print("No players in the catalog.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Country")
    table.add_column("Price", justify="right")
    table.add_column("Points", justify="right")
    for p in players:
        table.add_row(p.id, p.name, p.country.value, f"{p.price:g}", f"{p.points:g}")
    console.print(table)


def _badge(player_id: str, team: Team) -> str:
    if player_id == team.captain:
        return "(C)"
    if player_id == team.vice_captain:
        return "(VC)"
    return ""


def print_team(team: Team, catalog_by_id: Mapping[str, Player], points: float, rules: GameRules) -> None:
    console.print(f"[bold]{team.team_name}[/bold] ({team.user_id})")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Country")
    table.add_column("Role")
    table.add_column("Price", justify="right")
    table.add_column("Points", justify="right")
    for selection in team.players:
        player = catalog_by_id.get(selection.player_id)
        if player is None:
            table.add_row(selection.player_id, "—", _badge(selection.player_id, team), "—", "0.0")
            continue
        weighted = player.points * role_multiplier(player.id, team, rules)
        table.add_row(
            player.name, player.country.value, _badge(player.id, team), f"{player.price:g}", format_points(weighted)
        )
    console.print(table)
    remaining = remaining_budget(Roster(selections=team.players), catalog_by_id, rules.budget_ceiling)
    console.print(f"  Budget remaining: {remaining:g} / {rules.budget_ceiling:g}")
    console.print(f"  Total points: [bold]{format_points(points)}[/bold]")


def print_leaderboard(entries: Sequence[LeaderboardEntry], *, user_rank: RankLookup | None = None) -> None:
    if not entries:
        console.print("No teams have been saved yet.")
    else:
        table = Table(show_edge=False, pad_edge=False)
        table.add_column("Rank", justify="right")
        table.add_column("User")
        table.add_column("Team")
        table.add_column("Points", justify="right")
        for i, entry in enumerate(entries, start=1):
            table.add_row(str(i), entry.user_name, entry.team_name, format_points(entry.points))
        console.print(table)
    if user_rank is not None:
        console.print(f"Your rank: [bold]{format_rank(user_rank)}[/bold]")


def print_settings(settings: GameSettings, rules: GameRules) -> None:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Setting")
    table.add_column("Value", justify="right")
    table.add_row("signup_enabled", str(settings.signup_enabled))
    table.add_row("login_enabled", str(settings.login_enabled))
    table.add_row("team_edit_enabled", str(settings.team_edit_enabled))
    table.add_row("leaderboard_public", str(settings.leaderboard_public))
    table.add_row("teams_public", str(settings.teams_public))
    table.add_row("budget_ceiling", f"{rules.budget_ceiling:g}")
    table.add_row("roster_size", str(rules.roster_size))
    table.add_row("captain_multiplier", f"{rules.captain_multiplier:g}")
    table.add_row("vice_captain_multiplier", f"{rules.vice_captain_multiplier:g}")
    console.print(table)
