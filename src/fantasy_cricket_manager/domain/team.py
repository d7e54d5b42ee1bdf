from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Role(StrEnum):
    CAPTAIN = "captain"
    VICE_CAPTAIN = "vice_captain"


@dataclass(frozen=True)
class PlayerSelection:
    player_id: str


@dataclass(frozen=True)
class Roster:
    """An in-progress selection. Roles point into ``selections`` and are cleared when their player leaves."""

    selections: tuple[PlayerSelection, ...] = ()
    captain: str | None = None
    vice_captain: str | None = None

    @property
    def player_ids(self) -> tuple[str, ...]:
        return tuple(s.player_id for s in self.selections)

    def contains(self, player_id: str) -> bool:
        return any(s.player_id == player_id for s in self.selections)

    def __len__(self) -> int:
        return len(self.selections)


@dataclass(frozen=True)
class Team:
    user_id: str
    team_name: str
    players: tuple[PlayerSelection, ...]
    captain: str | None = None
    vice_captain: str | None = None
    updated_at: datetime | None = None
