"""
Estimator models.

Value types shared by services and the web layer.
"""

from app.models.types import InputMethod, LookupState, UserPointsLookup

__all__ = [
    "InputMethod",
    "LookupState",
    "UserPointsLookup",
]
