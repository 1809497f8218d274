"""Shared domain components.

This module exports exceptions and time helpers used across domain
boundaries.
"""

from okozukai.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from okozukai.domain.shared.time import ensure_tz_aware, to_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    # Utilities
    "ensure_tz_aware",
    "to_utc",
    "utc_now",
]
