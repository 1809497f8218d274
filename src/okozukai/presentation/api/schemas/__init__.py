"""API request and response schemas."""

from okozukai.presentation.api.schemas.common import ErrorResponse, HealthResponse
from okozukai.presentation.api.schemas.journals import (
    JournalCreateRequest,
    JournalResponse,
    JournalUpdateRequest,
)
from okozukai.presentation.api.schemas.reports import (
    MonthGroupResponse,
    PeriodRollupResponse,
    SpendingByTagItemResponse,
    SpendingByTagMonthlyResponse,
    SpendingByTagMonthResponse,
    SpendingByTagResponse,
    SummaryResponse,
    YearGroupResponse,
)
from okozukai.presentation.api.schemas.tags import (
    TagCreateRequest,
    TagResponse,
    TagUpdateRequest,
)
from okozukai.presentation.api.schemas.transactions import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionTagResponse,
    TransactionUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "JournalCreateRequest",
    "JournalResponse",
    "JournalUpdateRequest",
    "MonthGroupResponse",
    "PeriodRollupResponse",
    "SpendingByTagItemResponse",
    "SpendingByTagMonthResponse",
    "SpendingByTagMonthlyResponse",
    "SpendingByTagResponse",
    "SummaryResponse",
    "TagCreateRequest",
    "TagResponse",
    "TagUpdateRequest",
    "TransactionCreateRequest",
    "TransactionResponse",
    "TransactionTagResponse",
    "TransactionUpdateRequest",
    "YearGroupResponse",
]
