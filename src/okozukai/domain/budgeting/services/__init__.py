"""Domain services for the budgeting domain."""

from okozukai.domain.budgeting.services.tag_color_service import (
    TAG_COLOR_PALETTE,
    TagColorService,
)
from okozukai.domain.budgeting.services.transaction_report_service import (
    TransactionReportService,
)

__all__ = ["TAG_COLOR_PALETTE", "TagColorService", "TransactionReportService"]
