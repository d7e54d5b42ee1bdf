from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from fantasy_cricket_manager.domain.errors import FcmError, RosterError
from fantasy_cricket_manager.domain.team import Roster, Team

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]

# Roster edits: toggle, role assignment, budget re-check
RosterResult: TypeAlias = Result[Roster, RosterError]
# Save validation yields the normalized team
TeamResult: TypeAlias = Result[Team, RosterError]
# Application-level save, which can also fail on the gate or the store
SaveResult: TypeAlias = Result[Team, FcmError]
