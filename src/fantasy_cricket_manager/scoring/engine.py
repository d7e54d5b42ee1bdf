import logging
from collections.abc import Mapping

from fantasy_cricket_manager.domain.game_settings import DEFAULT_RULES, GameRules
from fantasy_cricket_manager.domain.player import Player
from fantasy_cricket_manager.domain.team import Team

logger = logging.getLogger(__name__)


def role_multiplier(player_id: str, team: Team, rules: GameRules = DEFAULT_RULES) -> float:
    if player_id == team.captain:
        return rules.captain_multiplier
    if player_id == team.vice_captain:
        return rules.vice_captain_multiplier
    return 1.0


def score_team(team: Team, catalog_by_id: Mapping[str, Player], rules: GameRules = DEFAULT_RULES) -> float:
    """Sum each selected player's current points, weighted by captaincy.

    Computed fresh from the catalog snapshot on every call. A selection whose
    player has left the catalog contributes 0. The total is not rounded.
    """
    total = 0.0
    for selection in team.players:
        player = catalog_by_id.get(selection.player_id)
        if player is None:
            logger.debug("Player %s missing from catalog; scoring 0 for user %s", selection.player_id, team.user_id)
            continue
        total += player.points * role_multiplier(selection.player_id, team, rules)
    return total
