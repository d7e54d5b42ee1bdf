from collections.abc import Iterable, Mapping, Sequence

from fantasy_cricket_manager.domain.game_settings import DEFAULT_RULES, GameRules
from fantasy_cricket_manager.domain.leaderboard import (
    UNKNOWN_USER_NAME,
    LeaderboardEntry,
    RankLookup,
    Ranked,
    Unranked,
)
from fantasy_cricket_manager.domain.player import Player
from fantasy_cricket_manager.domain.team import Team
from fantasy_cricket_manager.scoring.engine import score_team


def rank_teams(
    teams: Iterable[Team],
    catalog_by_id: Mapping[str, Player],
    user_names_by_id: Mapping[str, str],
    rules: GameRules = DEFAULT_RULES,
) -> list[LeaderboardEntry]:
    """Score every team and order them best first.

    Teams with equal scores keep the order they were given in.
    """
    entries = [
        LeaderboardEntry(
            user_id=team.user_id,
            user_name=user_names_by_id.get(team.user_id, UNKNOWN_USER_NAME),
            team_name=team.team_name,
            points=score_team(team, catalog_by_id, rules),
            team=team,
        )
        for team in teams
    ]
    # sorted() is stable, including with reverse=True
    return sorted(entries, key=lambda e: e.points, reverse=True)


def find_user_rank(entries: Sequence[LeaderboardEntry], user_id: str) -> RankLookup:
    for position, entry in enumerate(entries, start=1):
        if entry.user_id == user_id:
            return Ranked(position=position)
    return Unranked()
