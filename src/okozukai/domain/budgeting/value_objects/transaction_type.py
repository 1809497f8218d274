"""Transaction type enumeration."""

from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a money movement within a journal."""

    IN = "In"  # Income, refunds
    OUT = "Out"  # Spending

    @classmethod
    def _missing_(cls, value: object) -> Optional["TransactionType"]:
        # Accept "in", "OUT", " Out " etc.
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value.lower() == normalized:
                    return member
        return None
