"""Tests for transaction export DTOs."""

from okozukai.application.dtos import CSV_HEADER, ExportResult, TransactionExportDTO
from okozukai.domain.budgeting.value_objects import ExportFormat
from tests.shared.fixtures.factories import make_journal, make_tag, make_transaction, utc


def test_from_transaction_flattens_journal_and_tags():
    journal = make_journal(name="Household", currency="EUR")
    txn = make_transaction(
        journal,
        "Out",
        "4.5",
        utc(2026, 1, 2),
        note="Bus",
        tags=[make_tag("Transit"), make_tag("Work")],
    )

    dto = TransactionExportDTO.from_transaction(txn)

    assert dto.journal_id == str(journal.id)
    assert dto.journal_name == "Household"
    assert dto.currency == "EUR"
    assert dto.type == "Out"
    assert dto.amount == "4.50"
    assert dto.occurred_at == "2026-01-02T12:00:00+00:00"
    assert dto.tags == ("Transit", "Work")


def test_csv_row_matches_header_order_and_joins_tags():
    journal = make_journal()
    txn = make_transaction(
        journal,
        "In",
        "10",
        utc(2026, 1, 2),
        tags=[make_tag("A"), make_tag("B")],
    )

    row = TransactionExportDTO.from_transaction(txn).to_csv_row()

    assert len(row) == len(CSV_HEADER)
    assert row[CSV_HEADER.index("Tags")] == "A|B"
    assert row[CSV_HEADER.index("Note")] == ""


def test_export_result_exposes_format_details():
    result = ExportResult(format=ExportFormat.JSON, transactions=[])

    assert result.count == 0
    assert result.media_type == "application/json"
    assert result.file_name == "transactions.json"
