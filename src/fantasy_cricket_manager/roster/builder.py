"""Roster construction rules: selection toggling, role assignment and save validation.

Every function takes the current roster value and returns a new one wrapped in
``Ok``, or the validation failure wrapped in ``Err``. Nothing here reads global
settings or touches storage; the caller decides whether editing is open and
persists the resulting ``Team``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import TYPE_CHECKING

from fantasy_cricket_manager.domain.errors import (
    BudgetExceeded,
    CardinalityExceeded,
    DuplicateRole,
    IncompleteRoster,
    MissingRole,
    NotInRoster,
)
from fantasy_cricket_manager.domain.game_settings import DEFAULT_RULES
from fantasy_cricket_manager.domain.result import Err, Ok, RosterResult, TeamResult
from fantasy_cricket_manager.domain.team import PlayerSelection, Role, Roster, Team

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from fantasy_cricket_manager.domain.player import Player

logger = logging.getLogger(__name__)

# Prices step by 0.1, so sums accumulate binary rounding error.
_BUDGET_TOLERANCE = 1e-9


def spent_budget(roster: Roster, catalog_by_id: Mapping[str, Player]) -> float:
    """Total price of the current selections. Players missing from the catalog cost nothing."""
    return math.fsum(catalog_by_id[pid].price for pid in roster.player_ids if pid in catalog_by_id)


def remaining_budget(
    roster: Roster,
    catalog_by_id: Mapping[str, Player],
    budget_ceiling: float = DEFAULT_RULES.budget_ceiling,
) -> float:
    return budget_ceiling - spent_budget(roster, catalog_by_id)


def _remove(roster: Roster, player_id: str) -> Roster:
    return Roster(
        selections=tuple(s for s in roster.selections if s.player_id != player_id),
        captain=None if roster.captain == player_id else roster.captain,
        vice_captain=None if roster.vice_captain == player_id else roster.vice_captain,
    )


def toggle_selection(
    roster: Roster,
    player: Player,
    catalog_by_id: Mapping[str, Player],
    budget_ceiling: float = DEFAULT_RULES.budget_ceiling,
    max_size: int = DEFAULT_RULES.roster_size,
) -> RosterResult:
    """Add ``player`` if absent, remove it if present.

    Removing a captain or vice-captain clears that role. Adding is refused when
    the roster is full or when the player's price would push spending past
    ``budget_ceiling``.
    """
    if roster.contains(player.id):
        return Ok(_remove(roster, player.id))

    if len(roster) >= max_size:
        return Err(CardinalityExceeded(message=f"You can only select {max_size} players", max_size=max_size))

    attempted = spent_budget(roster, catalog_by_id) + player.price
    if attempted > budget_ceiling + _BUDGET_TOLERANCE:
        return Err(
            BudgetExceeded(
                message="Insufficient budget",
                budget_ceiling=budget_ceiling,
                attempted_total=attempted,
            )
        )

    return Ok(replace(roster, selections=(*roster.selections, PlayerSelection(player_id=player.id))))


def set_role(roster: Roster, player_id: str, role: Role) -> RosterResult:
    """Point ``role`` at ``player_id``, replacing whoever held it.

    Captain and vice-captain may briefly coincide; ``validate_for_save`` rejects that.
    """
    if not roster.contains(player_id):
        return Err(NotInRoster(message=f"Player '{player_id}' is not in your team", player_id=player_id))
    match role:
        case Role.CAPTAIN:
            return Ok(replace(roster, captain=player_id))
        case Role.VICE_CAPTAIN:
            return Ok(replace(roster, vice_captain=player_id))


def check_budget(
    roster: Roster,
    catalog_by_id: Mapping[str, Player],
    budget_ceiling: float = DEFAULT_RULES.budget_ceiling,
) -> RosterResult:
    spent = spent_budget(roster, catalog_by_id)
    if spent > budget_ceiling + _BUDGET_TOLERANCE:
        return Err(BudgetExceeded(message="Insufficient budget", budget_ceiling=budget_ceiling, attempted_total=spent))
    return Ok(roster)


def validate_for_save(
    roster: Roster,
    user_id: str,
    team_name: str,
    updated_at: datetime | None = None,
    roster_size: int = DEFAULT_RULES.roster_size,
) -> TeamResult:
    # A repeated selection counts once
    count = len(set(roster.player_ids))
    if count != roster_size or count != len(roster):
        return Err(
            IncompleteRoster(
                message=f"Please select exactly {roster_size} players",
                selected=count,
                required=roster_size,
            )
        )

    missing = tuple(
        role.value
        for role, holder in ((Role.CAPTAIN, roster.captain), (Role.VICE_CAPTAIN, roster.vice_captain))
        if not holder
    )
    if missing:
        return Err(MissingRole(message="Please select captain and vice-captain", missing=missing))

    for holder in (roster.captain, roster.vice_captain):
        if holder is not None and not roster.contains(holder):
            return Err(NotInRoster(message=f"Player '{holder}' is not in your team", player_id=holder))

    if roster.captain == roster.vice_captain:
        return Err(
            DuplicateRole(
                message="Captain and vice-captain must be different",
                player_id=roster.captain or "",
            )
        )

    return Ok(
        Team(
            user_id=user_id,
            team_name=team_name.strip(),
            players=roster.selections,
            captain=roster.captain,
            vice_captain=roster.vice_captain,
            updated_at=updated_at,
        )
    )


def roster_from_team(team: Team | None) -> Roster:
    """Load a stored team back into an editable roster.

    A role that names a player no longer in the team is treated as unset.
    """
    if team is None:
        return Roster()
    selected = {s.player_id for s in team.players}
    captain = team.captain if team.captain in selected else None
    vice_captain = team.vice_captain if team.vice_captain in selected else None
    if captain != team.captain or vice_captain != team.vice_captain:
        logger.debug("Cleared dangling role reference on team for user %s", team.user_id)
    return Roster(selections=team.players, captain=captain, vice_captain=vice_captain)
