"""Report shapes produced by the transaction reporting service.

All report values are immutable. Monetary totals are ``Decimal``; the
spending-by-tag totals are already rounded to two decimal places.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

if TYPE_CHECKING:
    from okozukai.domain.budgeting.entities.transaction import Transaction

UNTAGGED_LABEL = "Untagged"


@dataclass(frozen=True)
class TransactionSummary:
    """Inflow/outflow totals for a filtered set of transactions."""

    currency: str
    total_in: Decimal
    total_out: Decimal
    net: Decimal

    @classmethod
    def empty(cls) -> TransactionSummary:
        return cls(
            currency="",
            total_in=Decimal("0"),
            total_out=Decimal("0"),
            net=Decimal("0"),
        )


@dataclass(frozen=True)
class PeriodRollup:
    """Totals for a single year or month.

    ``opening`` is always zero: balances are not carried across periods,
    so ``closing`` equals ``net_change``.
    """

    currency: str
    opening: Decimal
    total_in: Decimal
    total_out: Decimal
    net_change: Decimal
    closing: Decimal


@dataclass(frozen=True)
class MonthGroup:
    year: int
    month: int
    transactions: tuple[Transaction, ...]
    rollups: tuple[PeriodRollup, ...]


@dataclass(frozen=True)
class YearGroup:
    year: int
    months: tuple[MonthGroup, ...]
    rollups: tuple[PeriodRollup, ...]


@dataclass(frozen=True)
class SpendingByTagItem:
    """Spending attributed to one tag (``tag_id`` is None for untagged)."""

    tag_id: Optional[UUID]
    tag_name: str
    total_out: Decimal

    @property
    def is_untagged(self) -> bool:
        return self.tag_id is None


@dataclass(frozen=True)
class SpendingByTag:
    currency: str
    items: tuple[SpendingByTagItem, ...]


@dataclass(frozen=True)
class SpendingByTagMonth:
    year: int
    month: int
    items: tuple[SpendingByTagItem, ...]


@dataclass(frozen=True)
class SpendingByTagMonthly:
    currency: str
    months: tuple[SpendingByTagMonth, ...]
