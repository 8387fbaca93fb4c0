"""
Standard type definitions for the estimator session.

Explicit states of the input forms and of the fetch-by-address flow.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum


class InputMethod(StrEnum):
    """Mutually exclusive input forms."""

    ADDRESS = "address"
    MANUAL = "manual"


class LookupState(StrEnum):
    """
    Fetch-by-address flow.

    IDLE -> LOADING -> SUCCESS | NO_POINTS | ERROR, back to LOADING on
    every new submission.
    """

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    NO_POINTS = "no_points"
    ERROR = "error"


@dataclass(frozen=True)
class UserPointsLookup:
    """Outcome of a staking points lookup for one address."""

    state: LookupState
    points: Decimal | None = None
    message: str | None = None

    @property
    def is_success(self) -> bool:
        """True when positive points were found."""
        return self.state == LookupState.SUCCESS
