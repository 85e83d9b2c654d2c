"""
Domain exceptions for analytics app.

Exception Hierarchy:
    DomainValidationError (apps.common)
    └── InvalidTimeRangeError
"""

from apps.common.exceptions import DomainValidationError


class InvalidTimeRangeError(DomainValidationError):
    """
    Raised when the reporting window is not one of the supported ranges.

    Example:
        raise InvalidTimeRangeError(
            "Invalid time range: '2weeks'. Valid options: 7days, 30days, 90days, 1year"
        )
    """

    default_message = 'Invalid time range'
