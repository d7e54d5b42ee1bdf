import logging
from datetime import UTC, datetime

from fantasy_cricket_manager.catalog.lookup import index_catalog
from fantasy_cricket_manager.domain.errors import CardinalityExceeded, StoreWriteFailed, TeamEditingDisabled
from fantasy_cricket_manager.domain.game_settings import DEFAULT_RULES, GameRules
from fantasy_cricket_manager.domain.leaderboard import LeaderboardEntry
from fantasy_cricket_manager.domain.result import Err, Ok, SaveResult
from fantasy_cricket_manager.domain.team import Roster, Team
from fantasy_cricket_manager.repos.protocols import PlayerRepo, TeamRepo, UserDirectory
from fantasy_cricket_manager.roster.builder import check_budget, roster_from_team, validate_for_save
from fantasy_cricket_manager.scoring.engine import score_team
from fantasy_cricket_manager.scoring.leaderboard import rank_teams

logger = logging.getLogger(__name__)


def load_roster(team_repo: TeamRepo, user_id: str) -> Roster:
    """Editable roster for ``user_id``: their saved team, or an empty roster if they have none."""
    return roster_from_team(team_repo.get(user_id))


def save_team(
    team_repo: TeamRepo,
    player_repo: PlayerRepo,
    roster: Roster,
    user_id: str,
    team_name: str,
    *,
    team_edit_enabled: bool,
    rules: GameRules = DEFAULT_RULES,
    now: datetime | None = None,
) -> SaveResult:
    """Validate ``roster`` against a fresh catalog snapshot and persist it.

    The roster was built against whatever prices the caller saw; prices may
    have moved since, so budget and size are checked again right before the
    write. On ``Err`` nothing was stored and the caller should keep showing
    its previously saved team.
    """
    if not team_edit_enabled:
        logger.warning("Rejected team save for %s: team editing is disabled", user_id)
        return Err(TeamEditingDisabled(message="Team editing is currently disabled", user_id=user_id))

    if len(roster) > rules.roster_size:
        return Err(
            CardinalityExceeded(message=f"You can only select {rules.roster_size} players", max_size=rules.roster_size)
        )

    catalog_by_id = index_catalog(player_repo.all())
    budget = check_budget(roster, catalog_by_id, rules.budget_ceiling)
    if isinstance(budget, Err):
        logger.warning("Rejected team save for %s: %s", user_id, budget.error.message)
        return budget

    validated = validate_for_save(roster, user_id, team_name, now or datetime.now(UTC), rules.roster_size)
    if isinstance(validated, Err):
        return validated
    team = validated.value

    try:
        team_repo.put(team)
    except Exception as e:
        logger.warning("Failed to store team for %s: %s", user_id, e)
        return Err(StoreWriteFailed(message="Failed to save team", user_id=user_id, cause=str(e)))

    logger.info("Saved team '%s' for %s", team.team_name, user_id)
    return Ok(team)


def team_points(
    team_repo: TeamRepo,
    player_repo: PlayerRepo,
    user_id: str,
    rules: GameRules = DEFAULT_RULES,
) -> float | None:
    team = team_repo.get(user_id)
    if team is None:
        return None
    return score_team(team, index_catalog(player_repo.all()), rules)


def build_leaderboard(
    team_repo: TeamRepo,
    player_repo: PlayerRepo,
    users: UserDirectory,
    rules: GameRules = DEFAULT_RULES,
) -> list[LeaderboardEntry]:
    """Rank every saved team from the current catalog. Never cached."""
    return rank_teams(team_repo.all(), index_catalog(player_repo.all()), users.names_by_id(), rules)
