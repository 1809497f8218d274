"""Export adapters."""

from okozukai.infrastructure.export.transaction_export_renderer import (
    TransactionExportRenderer,
)

__all__ = ["TransactionExportRenderer"]
