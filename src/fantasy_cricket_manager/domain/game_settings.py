from dataclasses import dataclass


@dataclass(frozen=True)
class GameSettings:
    """Admin-controlled feature flags, passed explicitly to whatever needs them."""

    signup_enabled: bool = True
    login_enabled: bool = True
    team_edit_enabled: bool = True
    leaderboard_public: bool = False
    teams_public: bool = False


@dataclass(frozen=True)
class GameRules:
    budget_ceiling: float = 100.0
    roster_size: int = 11
    captain_multiplier: float = 2.0
    vice_captain_multiplier: float = 1.5


DEFAULT_RULES = GameRules()
