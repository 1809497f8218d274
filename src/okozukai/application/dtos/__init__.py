"""Data transfer objects for the application layer."""

from okozukai.application.dtos.export_dto import (
    CSV_HEADER,
    TAG_SEPARATOR,
    ExportResult,
    TransactionExportDTO,
)

__all__ = [
    "CSV_HEADER",
    "TAG_SEPARATOR",
    "ExportResult",
    "TransactionExportDTO",
]
