import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

import yaml

from fantasy_cricket_manager.domain.player import DEFAULT_POINTS, DEFAULT_PRICE, Country, Player, make_player_id

logger = logging.getLogger(__name__)


def _parse_country(raw: str) -> Country:
    try:
        return Country(raw)
    except ValueError:
        raise ValueError(f"Unknown country '{raw}'. Expected one of: {', '.join(c.value for c in Country)}")


def initialize_catalog(
    names_by_country: Mapping[str, Sequence[str]],
    price: float = DEFAULT_PRICE,
    points: float = DEFAULT_POINTS,
) -> list[Player]:
    """Build the starting catalog from a country -> player names mapping.

    Every player gets the same opening ``price`` and ``points``; admins adjust
    them individually afterwards. Re-running over the same names yields the
    same ids, so a store keyed by id is overwritten rather than duplicated.
    """
    players: list[Player] = []
    for raw_country, names in names_by_country.items():
        country = _parse_country(raw_country)
        for name in names:
            players.append(
                Player(
                    id=make_player_id(country.value, name),
                    name=name,
                    country=country,
                    price=price,
                    points=points,
                )
            )
    logger.debug("Initialized catalog with %d players across %d countries", len(players), len(names_by_country))
    return players


def load_seed(path: Path) -> dict[str, list[str]]:
    """Load a ``country: [names...]`` YAML seed file."""
    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of country to player names")
    seed: dict[str, list[str]] = {}
    for country, names in data.items():
        if not isinstance(names, list):
            raise ValueError(f"{path}: players for '{country}' must be a list")
        seed[str(country)] = [str(n) for n in names]
    return seed
