"""Report schemas: summary, grouped view and spending by tag."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from okozukai.presentation.api.schemas.transactions import TransactionResponse


class SummaryResponse(BaseModel):
    """Totals over the filtered transactions.

    ``currency`` is empty when nothing matched.
    """

    currency: str
    total_in: Decimal
    total_out: Decimal
    net: Decimal


class PeriodRollupResponse(BaseModel):
    """Totals for one year or month. Opening balance is always zero."""

    currency: str
    opening: Decimal
    total_in: Decimal
    total_out: Decimal
    net_change: Decimal
    closing: Decimal


class MonthGroupResponse(BaseModel):
    year: int
    month: int = Field(ge=1, le=12)
    transactions: list[TransactionResponse]
    rollups: list[PeriodRollupResponse]


class YearGroupResponse(BaseModel):
    year: int
    months: list[MonthGroupResponse]
    rollups: list[PeriodRollupResponse]


class SpendingByTagItemResponse(BaseModel):
    """Out spending attributed to one tag; ``tag_id`` is null for 'Untagged'."""

    tag_id: Optional[UUID] = None
    tag_name: str
    total_out: Decimal


class SpendingByTagResponse(BaseModel):
    currency: str
    items: list[SpendingByTagItemResponse]


class SpendingByTagMonthResponse(BaseModel):
    year: int
    month: int = Field(ge=1, le=12)
    items: list[SpendingByTagItemResponse]


class SpendingByTagMonthlyResponse(BaseModel):
    currency: str
    months: list[SpendingByTagMonthResponse]
