from dataclasses import dataclass
from typing import TypeAlias

from fantasy_cricket_manager.domain.team import Team

UNKNOWN_USER_NAME = "Unknown"


@dataclass(frozen=True)
class LeaderboardEntry:
    user_id: str
    user_name: str
    team_name: str
    points: float
    team: Team


@dataclass(frozen=True)
class Ranked:
    position: int


@dataclass(frozen=True)
class Unranked:
    pass


RankLookup: TypeAlias = Ranked | Unranked
