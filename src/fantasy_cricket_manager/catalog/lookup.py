from collections.abc import Iterable

from fantasy_cricket_manager.domain.player import Player

ALL_COUNTRIES = "All"


def index_catalog(players: Iterable[Player]) -> dict[str, Player]:
    return {p.id: p for p in players}


def filter_by_country(players: Iterable[Player], country: str | None) -> list[Player]:
    if country is None or country == ALL_COUNTRIES:
        return list(players)
    return [p for p in players if p.country == country]
