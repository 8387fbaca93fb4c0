"""
Exception handling utilities.

Defines the exception types of the estimator.
"""


class EstimatorError(Exception):
    """Base error of the reward estimator."""
    pass


class ExternalApiError(EstimatorError):
    """Raised when a remote API call fails or returns an unusable body."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class InvalidBoostError(EstimatorError, ValueError):
    """Raised when a boost multiplier outside the selectable set is chosen."""
    pass


class InvalidInputMethodError(EstimatorError, ValueError):
    """Raised when an unknown input method is selected."""
    pass

