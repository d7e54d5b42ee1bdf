import logging
import re
from dataclasses import replace

from fantasy_cricket_manager.domain.player import Player

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_admin_number(raw: str | float | int | None) -> float:
    """Parse an admin-entered price or points value.

    Accepts the numeric prefix of the text ("7.5 pts" -> 7.5) and falls back to
    0 for anything without one, so a cleared field resets the value.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, int | float):
        return float(raw)
    match = _LEADING_FLOAT.match(raw)
    if match is None:
        return 0.0
    return float(match.group(0))


def _replace_player(catalog: list[Player], player_id: str, **changes: float) -> list[Player]:
    if not any(p.id == player_id for p in catalog):
        logger.debug("No catalog entry for %s; catalog unchanged", player_id)
        return list(catalog)
    return [replace(p, **changes) if p.id == player_id else p for p in catalog]


def update_price(catalog: list[Player], player_id: str, price: float) -> list[Player]:
    if price < 0:
        raise ValueError(f"Price must be >= 0, got {price}")
    return _replace_player(catalog, player_id, price=price)


def update_points(catalog: list[Player], player_id: str, points: float) -> list[Player]:
    return _replace_player(catalog, player_id, points=points)
