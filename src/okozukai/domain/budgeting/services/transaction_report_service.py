"""Transaction reporting service.

Pure aggregation over an already-filtered, fully loaded list of
transactions. Nothing here touches a repository: callers fetch with the
filter they need and hand the materialised list over.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime, timezone
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING, Iterable, Optional, Sequence
from uuid import UUID

from okozukai.domain.budgeting.value_objects import (
    UNTAGGED_LABEL,
    MonthGroup,
    PeriodRollup,
    SpendingByTag,
    SpendingByTagItem,
    SpendingByTagMonth,
    SpendingByTagMonthly,
    TransactionSummary,
    YearGroup,
)

if TYPE_CHECKING:
    from okozukai.domain.budgeting.entities import Transaction

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")

_BucketKey = tuple[Optional[UUID], str]


class TransactionReportService:
    """Builds summary, grouped and spending-by-tag reports."""

    @staticmethod
    def summarize(transactions: Sequence[Transaction]) -> TransactionSummary:
        if not transactions:
            return TransactionSummary.empty()

        total_in, total_out = TransactionReportService._totals(transactions)
        return TransactionSummary(
            currency=transactions[0].currency,
            total_in=total_in,
            total_out=total_out,
            net=total_in - total_out,
        )

    @staticmethod
    def group_by_year_month(transactions: Sequence[Transaction]) -> list[YearGroup]:
        """Group by year (newest first), then month (newest first).

        Within a month transactions are ordered by ``occurred_at`` descending,
        ties broken by ``created_at`` descending.
        """
        by_year: dict[int, list[Transaction]] = defaultdict(list)
        for transaction in transactions:
            by_year[_utc(transaction).year].append(transaction)

        years: list[YearGroup] = []
        for year in sorted(by_year, reverse=True):
            year_transactions = by_year[year]

            by_month: dict[int, list[Transaction]] = defaultdict(list)
            for transaction in year_transactions:
                by_month[_utc(transaction).month].append(transaction)

            months = tuple(
                MonthGroup(
                    year=year,
                    month=month,
                    transactions=tuple(
                        sorted(
                            by_month[month],
                            key=lambda t: (t.occurred_at, t.created_at),
                            reverse=True,
                        ),
                    ),
                    rollups=TransactionReportService._rollups(by_month[month]),
                )
                for month in sorted(by_month, reverse=True)
            )
            years.append(
                YearGroup(
                    year=year,
                    months=months,
                    rollups=TransactionReportService._rollups(year_transactions),
                ),
            )

        logger.debug(
            "Grouped %d transactions into %d years",
            len(transactions),
            len(years),
        )
        return years

    @staticmethod
    def spending_by_tag(
        transactions: Iterable[Transaction],
        currency: str,
    ) -> SpendingByTag:
        """Attribute Out spending to tags, splitting evenly across shared tags."""
        buckets = TransactionReportService._bucket_spending(transactions)
        return SpendingByTag(
            currency=currency,
            items=TransactionReportService._to_items(buckets),
        )

    @staticmethod
    def spending_by_tag_monthly(
        transactions: Iterable[Transaction],
        currency: str,
    ) -> SpendingByTagMonthly:
        """Same attribution as ``spending_by_tag``, per month (oldest first).

        Months without Out transactions are left out.
        """
        by_month: dict[tuple[int, int], list[Transaction]] = defaultdict(list)
        for transaction in transactions:
            if not _is_spending(transaction):
                continue
            occurred = _utc(transaction)
            by_month[(occurred.year, occurred.month)].append(transaction)

        months = tuple(
            SpendingByTagMonth(
                year=year,
                month=month,
                items=TransactionReportService._to_items(
                    TransactionReportService._bucket_spending(by_month[(year, month)]),
                ),
            )
            for year, month in sorted(by_month)
        )
        return SpendingByTagMonthly(currency=currency, months=months)

    @staticmethod
    def _totals(transactions: Iterable[Transaction]) -> tuple[Decimal, Decimal]:
        total_in = ZERO
        total_out = ZERO
        for transaction in transactions:
            if transaction.is_out:
                total_out += transaction.amount
            else:
                total_in += transaction.amount
        return total_in, total_out

    @staticmethod
    def _rollups(transactions: Sequence[Transaction]) -> tuple[PeriodRollup, ...]:
        # One journal means one currency, so at most one rollup per period.
        if not transactions:
            return ()

        total_in, total_out = TransactionReportService._totals(transactions)
        net = total_in - total_out
        return (
            PeriodRollup(
                currency=transactions[0].currency,
                opening=ZERO,
                total_in=total_in,
                total_out=total_out,
                net_change=net,
                closing=net,
            ),
        )

    @staticmethod
    def _bucket_spending(
        transactions: Iterable[Transaction],
    ) -> dict[_BucketKey, Decimal]:
        buckets: dict[_BucketKey, Decimal] = defaultdict(lambda: ZERO)
        for transaction in transactions:
            if not _is_spending(transaction):
                continue

            if not transaction.tags:
                buckets[(None, UNTAGGED_LABEL)] += transaction.amount
                continue

            share = transaction.amount / len(transaction.tags)
            for tag in transaction.tags:
                buckets[(tag.id, tag.name)] += share
        return buckets

    @staticmethod
    def _to_items(buckets: dict[_BucketKey, Decimal]) -> tuple[SpendingByTagItem, ...]:
        ordered = sorted(
            buckets.items(),
            key=lambda entry: (-entry[1], entry[0][1].casefold()),
        )
        return tuple(
            SpendingByTagItem(
                tag_id=tag_id,
                tag_name=tag_name,
                total_out=total.quantize(CENT, ROUND_HALF_EVEN),
            )
            for (tag_id, tag_name), total in ordered
        )


def _utc(transaction: Transaction) -> datetime:
    return transaction.occurred_at.astimezone(timezone.utc)


def _is_spending(transaction: Transaction) -> bool:
    return transaction.is_out and transaction.amount > 0
