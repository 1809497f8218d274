"""Value objects for the budgeting domain."""

from okozukai.domain.budgeting.value_objects.export_format import ExportFormat
from okozukai.domain.budgeting.value_objects.transaction_filter import (
    TransactionFilter,
)
from okozukai.domain.budgeting.value_objects.transaction_reports import (
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
from okozukai.domain.budgeting.value_objects.transaction_type import TransactionType

__all__ = [
    "UNTAGGED_LABEL",
    "ExportFormat",
    "MonthGroup",
    "PeriodRollup",
    "SpendingByTag",
    "SpendingByTagItem",
    "SpendingByTagMonth",
    "SpendingByTagMonthly",
    "TransactionFilter",
    "TransactionSummary",
    "TransactionType",
    "YearGroup",
]
