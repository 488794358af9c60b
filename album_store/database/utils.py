"""
Database utilities module.

This module provides utility functions for database operations including
error classification.
"""

from typing import Optional

# SQLSTATE classes (first two characters of the five-character code)
_PERMANENT_SQLSTATE_CLASSES = {
    "22",  # data exception
    "23",  # integrity constraint violation
    "42",  # syntax error or access rule violation
}

_SYSTEMIC_SQLSTATE_CLASSES = {
    "28",  # invalid authorization specification
    "3D",  # invalid catalog name (database does not exist)
}


def classify_database_error(exception: Optional[BaseException]) -> str:
    """
    Classify database errors into permanent, transient, or systemic categories.

    The SQLSTATE reported by psycopg is used when the error carries one;
    otherwise the message is matched against known indicators.

    Args:
        exception: Database exception to classify

    Returns:
        Error type: "permanent", "transient", or "systemic"
    """
    if exception is None:
        return "transient"

    # Values that cannot be bound never reach the server
    if isinstance(exception, ArithmeticError):
        return "permanent"

    sqlstate = getattr(exception, "sqlstate", None)
    if sqlstate:
        state_class = sqlstate[:2].upper()
        if state_class in _PERMANENT_SQLSTATE_CLASSES:
            return "permanent"
        if state_class in _SYSTEMIC_SQLSTATE_CLASSES:
            return "systemic"

    error_str = str(exception).lower()

    # Permanent errors - the same statement will fail again
    permanent_indicators = [
        "constraint violation",
        "check constraint",
        "not null violation",
        "null value in column",
        "duplicate key",
        "value too long",
        "numeric field overflow",
        "relation does not exist",
        "column does not exist",
    ]

    for indicator in permanent_indicators:
        if indicator in error_str:
            return "permanent"

    # Systemic errors - nothing will work until configuration changes
    systemic_indicators = [
        "authentication failed",
        "permission denied",
        "role does not exist",
        "database does not exist",
        "ssl required",
        "password authentication failed",
    ]

    for indicator in systemic_indicators:
        if indicator in error_str:
            return "systemic"

    # Default to transient
    # Includes: connection timeout, temporary network issues, deadlocks, etc.
    return "transient"
