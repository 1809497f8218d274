"""Tests for budgeting value objects."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from okozukai.domain.budgeting.value_objects import (
    ExportFormat,
    TransactionFilter,
    TransactionType,
)
from okozukai.domain.shared.exceptions import ErrorCode, ValidationError


class TestExportFormat:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("json", ExportFormat.JSON),
            ("JSON", ExportFormat.JSON),
            (" csv ", ExportFormat.CSV),
            ("Csv", ExportFormat.CSV),
        ],
    )
    def test_parse_is_case_insensitive(self, value, expected):
        assert ExportFormat.parse(value) is expected

    @pytest.mark.parametrize("value", ["xlsx", "", None])
    def test_unsupported_format_names_allowed_values(self, value):
        with pytest.raises(ValidationError) as exc_info:
            ExportFormat.parse(value)

        assert exc_info.value.code == ErrorCode.INVALID_FORMAT
        assert "json" in exc_info.value.message
        assert "csv" in exc_info.value.message
        assert exc_info.value.details["allowed"] == ["json", "csv"]

    def test_media_types_and_file_names(self):
        assert ExportFormat.JSON.media_type == "application/json"
        assert ExportFormat.CSV.media_type == "text/csv"
        assert ExportFormat.CSV.file_name == "transactions.csv"


class TestTransactionType:
    def test_values(self):
        assert TransactionType.IN.value == "In"
        assert TransactionType.OUT.value == "Out"

    def test_lookup_ignores_case(self):
        assert TransactionType("out") is TransactionType.OUT

    def test_unknown_value_raises_value_error(self):
        with pytest.raises(ValueError):
            TransactionType("Both")


class TestTransactionFilter:
    def test_blank_note_search_means_no_filter(self):
        criteria = TransactionFilter(journal_id=uuid4(), note_search="   ")

        assert criteria.note_search is None

    def test_tag_ids_are_deduplicated_in_order(self):
        first, second = uuid4(), uuid4()

        criteria = TransactionFilter(
            journal_id=uuid4(),
            tag_ids=(first, second, first),
        )

        assert criteria.tag_ids == (first, second)

    def test_inverted_range_detection(self):
        early = datetime(2026, 1, 1, tzinfo=timezone.utc)
        late = datetime(2026, 2, 1, tzinfo=timezone.utc)
        journal_id = uuid4()

        assert TransactionFilter(journal_id, late, early).has_inverted_range
        assert not TransactionFilter(journal_id, early, late).has_inverted_range
        assert not TransactionFilter(journal_id, early, early).has_inverted_range
        assert not TransactionFilter(journal_id, date_from=late).has_inverted_range

    def test_inverted_range_treats_naive_bound_as_utc(self):
        naive_early = datetime(2026, 1, 1)
        aware_late = datetime(2026, 2, 1, tzinfo=timezone.utc)
        journal_id = uuid4()

        assert not TransactionFilter(journal_id, naive_early, aware_late).has_inverted_range
        assert TransactionFilter(journal_id, aware_late, naive_early).has_inverted_range

    def test_inverted_range_compares_across_offsets(self):
        # 09:00+09:00 is 00:00 UTC, before 01:00 UTC
        tokyo = timezone(timedelta(hours=9))
        date_from = datetime(2026, 1, 1, 9, tzinfo=tokyo)
        date_to = datetime(2026, 1, 1, 1)

        assert not TransactionFilter(uuid4(), date_from, date_to).has_inverted_range
