from typing import Protocol

from fantasy_cricket_manager.domain.player import Player
from fantasy_cricket_manager.domain.team import Team


class PlayerRepo(Protocol):
    def all(self) -> list[Player]: ...


class TeamRepo(Protocol):
    def get(self, user_id: str) -> Team | None: ...

    def put(self, team: Team) -> None: ...

    def all(self) -> list[Team]: ...


class UserDirectory(Protocol):
    def names_by_id(self) -> dict[str, str]: ...
