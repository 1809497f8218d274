"""Export format value object."""

from enum import Enum

from okozukai.domain.shared.exceptions import ErrorCode, ValidationError


class ExportFormat(str, Enum):
    """Supported transaction export formats."""

    JSON = "json"
    CSV = "csv"

    @property
    def media_type(self) -> str:
        if self is ExportFormat.JSON:
            return "application/json"
        return "text/csv"

    @property
    def file_name(self) -> str:
        return f"transactions.{self.value}"

    @classmethod
    def parse(cls, value: str | None) -> "ExportFormat":
        """Parse a user-supplied format name (case-insensitive, trimmed)."""
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        msg = "Unsupported export format. Use 'json' or 'csv'."
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_FORMAT,
            details={"format": value, "allowed": [m.value for m in cls]},
        )
