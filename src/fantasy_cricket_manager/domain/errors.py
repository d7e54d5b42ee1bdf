from dataclasses import dataclass


@dataclass(frozen=True)
class FcmError:
    message: str


@dataclass(frozen=True)
class RosterError(FcmError):
    """Base for every validation outcome the roster builder can report."""


@dataclass(frozen=True)
class CardinalityExceeded(RosterError):
    max_size: int = 11


@dataclass(frozen=True)
class BudgetExceeded(RosterError):
    budget_ceiling: float = 100.0
    attempted_total: float = 0.0


@dataclass(frozen=True)
class NotInRoster(RosterError):
    player_id: str = ""


@dataclass(frozen=True)
class IncompleteRoster(RosterError):
    selected: int = 0
    required: int = 11


@dataclass(frozen=True)
class MissingRole(RosterError):
    missing: tuple[str, ...] = ()


@dataclass(frozen=True)
class DuplicateRole(RosterError):
    player_id: str = ""


@dataclass(frozen=True)
class TeamEditingDisabled(FcmError):
    user_id: str = ""


@dataclass(frozen=True)
class StoreWriteFailed(FcmError):
    user_id: str = ""
    cause: str = ""
