"""Tests for the Transaction entity."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from okozukai.domain.budgeting.entities import Journal, Tag, Transaction
from okozukai.domain.budgeting.exceptions import (
    InvalidAmountError,
    InvalidTransactionTypeError,
    JournalClosedError,
)
from okozukai.domain.budgeting.value_objects import TransactionType
from okozukai.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    ValidationError,
)

OCCURRED = datetime(2026, 2, 5, 12, 0, tzinfo=timezone.utc)


def _create(**overrides) -> Transaction:
    values = {
        "journal_id": uuid4(),
        "journal_is_closed": False,
        "type": TransactionType.OUT,
        "amount": Decimal("12.50"),
        "occurred_at": OCCURRED,
        "note": None,
    }
    values.update(overrides)
    return Transaction.create(**values)


class TestTransactionCreate:
    def test_create_in_open_journal(self):
        txn = _create(note="  Lunch ")

        assert txn.type is TransactionType.OUT
        assert txn.amount == Decimal("12.50")
        assert txn.note == "Lunch"
        assert txn.tags == ()

    def test_create_in_closed_journal_is_a_conflict(self):
        with pytest.raises(JournalClosedError) as exc_info:
            _create(journal_is_closed=True)

        assert isinstance(exc_info.value, ConflictError)
        assert exc_info.value.code == ErrorCode.JOURNAL_CLOSED

    @pytest.mark.parametrize("amount", ["0", "0.00", "-1", "-0.01"])
    def test_non_positive_amount_is_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            _create(amount=Decimal(amount))

    def test_amount_is_rounded_to_cents(self):
        assert _create(amount=Decimal("10.005")).amount == Decimal("10.00")
        assert _create(amount=Decimal("10.015")).amount == Decimal("10.02")

    def test_amount_rounding_to_zero_is_rejected(self):
        with pytest.raises(InvalidAmountError):
            _create(amount=Decimal("0.004"))

    @pytest.mark.parametrize("value", ["in", "IN", " In "])
    def test_type_is_parsed_case_insensitively(self, value):
        assert _create(type=value).type is TransactionType.IN

    def test_is_out_follows_type(self):
        assert _create(type=TransactionType.OUT).is_out
        assert not _create(type=TransactionType.IN).is_out

    def test_unknown_type_is_rejected(self):
        with pytest.raises(InvalidTransactionTypeError) as exc_info:
            _create(type="Transfer")

        assert exc_info.value.code == ErrorCode.INVALID_TRANSACTION_TYPE

    def test_blank_note_becomes_none(self):
        assert _create(note="   ").note is None

    def test_note_longer_than_500_characters_is_rejected(self):
        with pytest.raises(ValidationError):
            _create(note="n" * 501)

    def test_naive_occurred_at_is_treated_as_utc(self):
        txn = _create(occurred_at=datetime(2026, 1, 1, 9, 30))

        assert txn.occurred_at == datetime(2026, 1, 1, 9, 30, tzinfo=timezone.utc)


class TestTransactionUpdate:
    def test_update_replaces_fields(self):
        txn = _create()

        txn.update(
            journal_is_closed=False,
            type="In",
            amount=Decimal("99.99"),
            occurred_at=OCCURRED + timedelta(days=1),
            note="Refund",
        )

        assert txn.type is TransactionType.IN
        assert txn.amount == Decimal("99.99")
        assert txn.note == "Refund"

    def test_update_in_closed_journal_is_a_conflict(self):
        txn = _create()

        with pytest.raises(JournalClosedError):
            txn.update(
                journal_is_closed=True,
                type="Out",
                amount=Decimal("1"),
                occurred_at=OCCURRED,
            )
        assert txn.amount == Decimal("12.50")

    def test_update_with_zero_amount_is_rejected(self):
        txn = _create()

        with pytest.raises(InvalidAmountError):
            txn.update(
                journal_is_closed=False,
                type="Out",
                amount=Decimal("0"),
                occurred_at=OCCURRED,
            )

    def test_ensure_deletable(self):
        txn = _create()

        txn.ensure_deletable(journal_is_closed=False)
        with pytest.raises(JournalClosedError):
            txn.ensure_deletable(journal_is_closed=True)


class TestTransactionTagsAndJournal:
    def test_set_tags_deduplicates_by_id(self):
        groceries = Tag.create("Groceries", "#84cc16")
        transit = Tag.create("Transit", "#3b82f6")
        txn = _create()

        txn.set_tags([groceries, transit, groceries])

        assert txn.tags == (groceries, transit)

    def test_journal_name_and_currency_come_from_loaded_journal(self):
        journal = Journal.create("Travel", "JPY")
        txn = _create(journal_id=journal.id)

        assert txn.journal_name == ""
        assert txn.currency == ""

        txn.attach_journal(journal)

        assert txn.journal_name == "Travel"
        assert txn.currency == "JPY"

    def test_attach_foreign_journal_is_rejected(self):
        txn = _create()

        with pytest.raises(ValidationError):
            txn.attach_journal(Journal.create("Other", "USD"))
