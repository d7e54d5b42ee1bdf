import re
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_PRICE: float = 5.0
DEFAULT_POINTS: float = 0.0

_WHITESPACE = re.compile(r"\s+")


class Country(StrEnum):
    INDIA = "India"
    AUSTRALIA = "Australia"
    SRI_LANKA = "Sri Lanka"
    ZIMBABWE = "Zimbabwe"
    IRELAND = "Ireland"
    ENGLAND = "England"
    WEST_INDIES = "West Indies"
    SOUTH_AFRICA = "South Africa"
    NEW_ZEALAND = "New Zealand"
    AFGHANISTAN = "Afghanistan"


def make_player_id(country: str, name: str) -> str:
    """Derive the stable catalog key, e.g. ``("Sri Lanka", "Kusal Mendis") -> "sri_lanka_kusal_mendis"``."""
    return _WHITESPACE.sub("_", f"{country}_{name}").lower()


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    country: Country
    price: float = DEFAULT_PRICE
    points: float = DEFAULT_POINTS
