"""Filter criteria for transaction queries."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from okozukai.domain.shared.time import to_utc


@dataclass(frozen=True)
class TransactionFilter:
    """Criteria shared by the list, report and export queries.

    Attributes
    ----------
    journal_id
        Journal the transactions belong to (required)
    date_from
        Inclusive lower bound on ``occurred_at``
    date_to
        Inclusive upper bound on ``occurred_at``
    tag_ids
        Match transactions carrying any of these tags
    note_search
        Case-insensitive substring of the note; blank means no filter
    """

    journal_id: UUID
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    tag_ids: tuple[UUID, ...] = field(default_factory=tuple)
    note_search: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag_ids", tuple(dict.fromkeys(self.tag_ids)))
        if self.note_search is not None and not self.note_search.strip():
            object.__setattr__(self, "note_search", None)

    @property
    def has_inverted_range(self) -> bool:
        """True when both bounds are set and ``date_from`` is later, compared in UTC."""
        if self.date_from is None or self.date_to is None:
            return False
        return to_utc(self.date_from) > to_utc(self.date_to)
