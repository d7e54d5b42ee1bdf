from fantasy_cricket_manager.domain.player import Country, Player
from fantasy_cricket_manager.domain.team import PlayerSelection, Roster, Team


def make_player(
    player_id: str,
    *,
    name: str | None = None,
    country: Country = Country.INDIA,
    price: float = 5.0,
    points: float = 0.0,
) -> Player:
    return Player(id=player_id, name=name or player_id.title(), country=country, price=price, points=points)


def make_roster(*player_ids: str, captain: str | None = None, vice_captain: str | None = None) -> Roster:
    return Roster(
        selections=tuple(PlayerSelection(player_id=pid) for pid in player_ids),
        captain=captain,
        vice_captain=vice_captain,
    )


def make_team(
    *player_ids: str,
    user_id: str = "u1",
    team_name: str = "Team One",
    captain: str | None = None,
    vice_captain: str | None = None,
) -> Team:
    return Team(
        user_id=user_id,
        team_name=team_name,
        players=tuple(PlayerSelection(player_id=pid) for pid in player_ids),
        captain=captain,
        vice_captain=vice_captain,
    )


def eleven_players(price: float = 5.0, points: float = 0.0) -> list[Player]:
    return [make_player(f"p{i}", price=price, points=points) for i in range(1, 12)]
