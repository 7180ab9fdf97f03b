"""
Three-Valued Result
===================

Explicit true / false / unknown result for classifications that can fail
to decide (e.g. when floating-point arithmetic overflows).

Design:
- Enum instead of Optional[bool] (unknown is a real answer, not a missing one)
- Truth testing allowed only for known values
"""

from enum import Enum
from typing import Optional


class TriState(Enum):
    """
    Three-valued logical result.

    Example:
        >>> TriState.from_optional(None)
        <TriState.UNKNOWN: 'unknown'>
        >>> bool(TriState.TRUE)
        True
    """

    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"

    @classmethod
    def from_bool(cls, value: bool) -> "TriState":
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def from_optional(cls, value: Optional[bool]) -> "TriState":
        """Map None to UNKNOWN, booleans to TRUE/FALSE."""
        if value is None:
            return cls.UNKNOWN
        return cls.from_bool(value)

    @property
    def is_known(self) -> bool:
        return self is not TriState.UNKNOWN

    def to_optional(self) -> Optional[bool]:
        """Return True, False or None (for UNKNOWN)."""
        if self is TriState.UNKNOWN:
            return None
        return self is TriState.TRUE

    def __bool__(self) -> bool:
        if self is TriState.UNKNOWN:
            raise ValueError(
                "TriState.UNKNOWN has no truth value; check is_known first"
            )
        return self is TriState.TRUE
