"""Repository tests against a per-test SQLite database."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from okozukai.domain.budgeting.entities import Journal, Tag, Transaction
from okozukai.domain.budgeting.exceptions import DuplicateTagError
from okozukai.domain.budgeting.value_objects import TransactionFilter, TransactionType
from okozukai.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.database import db_session, sqlite_engine  # noqa: F401
from tests.shared.fixtures.factories import utc


@pytest.fixture
def factory(db_session):  # noqa: F811
    return SQLAlchemyRepositoryFactory(db_session)


async def _journal(factory, name="Household", currency="USD") -> Journal:
    journal = Journal.create(name, currency)
    await factory.journal_repository().save(journal)
    return journal


async def _tag(factory, name, color="#6366f1") -> Tag:
    tag = Tag.create(name, color)
    await factory.tag_repository().save(tag)
    return tag


async def _txn(  # NOQA: PLR0913
    factory,
    journal,
    type,
    amount,
    occurred_at,
    note=None,
    tags=(),
    created_at=None,
) -> Transaction:
    txn = Transaction(
        journal_id=journal.id,
        type=TransactionType(type),
        amount=Decimal(amount),
        occurred_at=occurred_at,
        note=note,
        created_at=created_at,
        tags=list(tags),
    )
    await factory.transaction_repository().save(txn)
    return txn


class TestJournalRepository:
    async def test_save_and_find_roundtrip(self, factory):
        journal = await _journal(factory, "Travel", "JPY")

        loaded = await factory.journal_repository().find_by_id(journal.id)

        assert loaded == journal
        assert loaded.name == "Travel"
        assert loaded.primary_currency == "JPY"
        assert loaded.is_closed is False
        assert loaded.created_at.tzinfo is not None

    async def test_save_updates_existing(self, factory):
        journal = await _journal(factory)
        journal.rename("Renamed")
        journal.close()

        await factory.journal_repository().save(journal)
        loaded = await factory.journal_repository().find_by_id(journal.id)

        assert loaded.name == "Renamed"
        assert loaded.is_closed is True

    async def test_find_all_newest_first(self, factory):
        repo = factory.journal_repository()
        old = Journal.reconstitute(
            id=uuid4(),
            name="Old",
            primary_currency="USD",
            is_closed=False,
            created_at=utc(2024, 1, 1),
        )
        await repo.save(old)
        new = await _journal(factory, "New")

        assert [j.name for j in await repo.find_all()] == [new.name, old.name]

    async def test_delete_removes_transactions_and_tag_links(self, factory):
        journal = await _journal(factory)
        other = await _journal(factory, "Other")
        tag = await _tag(factory, "Food")
        await _txn(factory, journal, "Out", "5", utc(2026, 1, 1), tags=[tag])
        kept = await _txn(factory, other, "Out", "7", utc(2026, 1, 1), tags=[tag])

        await factory.journal_repository().delete(journal.id)

        txn_repo = factory.transaction_repository()
        assert await factory.journal_repository().find_by_id(journal.id) is None
        assert await txn_repo.find_matching(TransactionFilter(journal.id)) == []
        remaining = await txn_repo.find_by_id(kept.id)
        assert remaining.tags == (tag,)
        assert await factory.tag_repository().find_by_id(tag.id) is not None


class TestTagRepository:
    async def test_find_by_name_count_and_order(self, factory):
        await _tag(factory, "Rent")
        food = await _tag(factory, "Food")
        repo = factory.tag_repository()

        assert await repo.count() == 2
        assert await repo.find_by_name("Food") == food
        assert await repo.find_by_name("food") is None
        assert [t.name for t in await repo.find_all()] == ["Food", "Rent"]

    async def test_find_by_ids_skips_unknown(self, factory):
        food = await _tag(factory, "Food")
        unknown = Tag.create("Ghost", "#000000")

        found = await factory.tag_repository().find_by_ids([food.id, unknown.id])

        assert found == [food]

    async def test_unique_name_violation_becomes_duplicate_tag_error(
        self,
        factory,
        db_session,  # noqa: F811
    ):
        await _tag(factory, "Food")
        await db_session.commit()

        with pytest.raises(DuplicateTagError):
            await factory.tag_repository().save(Tag.create("Food", "#f97316"))

        assert await factory.tag_repository().count() == 1

    async def test_detach_then_delete(self, factory):
        journal = await _journal(factory)
        food = await _tag(factory, "Food")
        rent = await _tag(factory, "Rent")
        txn = await _txn(factory, journal, "Out", "5", utc(2026, 1, 1), tags=[food, rent])
        repo = factory.tag_repository()

        await repo.detach_from_transactions(food.id)
        await repo.delete(food.id)

        assert await repo.find_by_id(food.id) is None
        reloaded = await factory.transaction_repository().find_by_id(txn.id)
        assert reloaded.tags == (rent,)


class TestTransactionRepository:
    async def test_roundtrip_carries_journal_and_tags(self, factory):
        journal = await _journal(factory, "Household", "EUR")
        food = await _tag(factory, "Food")
        txn = await _txn(
            factory,
            journal,
            "Out",
            "12.34",
            utc(2026, 1, 5),
            note="Lunch",
            tags=[food],
        )

        loaded = await factory.transaction_repository().find_by_id(txn.id)

        assert loaded.amount == Decimal("12.34")
        assert loaded.type is TransactionType.OUT
        assert loaded.note == "Lunch"
        assert loaded.occurred_at == utc(2026, 1, 5)
        assert loaded.journal_name == "Household"
        assert loaded.currency == "EUR"
        assert loaded.tags == (food,)

    async def test_update_replaces_tags(self, factory):
        journal = await _journal(factory)
        food = await _tag(factory, "Food")
        rent = await _tag(factory, "Rent")
        txn = await _txn(factory, journal, "Out", "5", utc(2026, 1, 1), tags=[food])
        repo = factory.transaction_repository()

        txn.update(
            journal_is_closed=False,
            type="In",
            amount=Decimal("6"),
            occurred_at=utc(2026, 1, 2),
            note="changed",
        )
        txn.set_tags([rent])
        await repo.save(txn)

        loaded = await repo.find_by_id(txn.id)
        assert loaded.type is TransactionType.IN
        assert loaded.amount == Decimal("6.00")
        assert loaded.tags == (rent,)

    async def test_delete(self, factory):
        journal = await _journal(factory)
        txn = await _txn(factory, journal, "Out", "5", utc(2026, 1, 1))
        repo = factory.transaction_repository()

        await repo.delete(txn.id)

        assert await repo.find_by_id(txn.id) is None

    async def test_matching_is_scoped_to_journal_and_ordered(self, factory):
        journal = await _journal(factory)
        other = await _journal(factory, "Other")
        same_instant = utc(2026, 1, 10)
        first = await _txn(
            factory, journal, "Out", "1", same_instant, created_at=utc(2026, 1, 10, 13)
        )
        second = await _txn(
            factory, journal, "Out", "2", same_instant, created_at=utc(2026, 1, 10, 14)
        )
        newest = await _txn(factory, journal, "In", "3", utc(2026, 1, 20))
        await _txn(factory, other, "Out", "4", utc(2026, 1, 15))

        found = await factory.transaction_repository().find_matching(
            TransactionFilter(journal.id),
        )

        assert found == [newest, second, first]

    async def test_date_bounds_are_inclusive(self, factory):
        journal = await _journal(factory)
        start = utc(2026, 1, 1, 0)
        end = utc(2026, 1, 31, 23)
        before = await _txn(factory, journal, "Out", "1", start - timedelta(seconds=1))
        on_start = await _txn(factory, journal, "Out", "2", start)
        on_end = await _txn(factory, journal, "Out", "3", end)
        after = await _txn(factory, journal, "Out", "4", end + timedelta(seconds=1))

        found = await factory.transaction_repository().find_matching(
            TransactionFilter(journal.id, date_from=start, date_to=end),
        )

        assert set(found) == {on_start, on_end}
        assert before not in found
        assert after not in found

    async def test_bounds_with_offset_are_compared_in_utc(self, factory):
        journal = await _journal(factory)
        txn = await _txn(factory, journal, "Out", "1", utc(2026, 1, 1, 3))
        tokyo = timezone(timedelta(hours=9))

        found = await factory.transaction_repository().find_matching(
            TransactionFilter(
                journal.id,
                date_from=datetime(2026, 1, 1, 12, tzinfo=tokyo),
                date_to=datetime(2026, 1, 1, 12, tzinfo=tokyo),
            ),
        )

        assert found == [txn]

    async def test_tag_filter_matches_any_tag(self, factory):
        journal = await _journal(factory)
        food = await _tag(factory, "Food")
        rent = await _tag(factory, "Rent")
        fun = await _tag(factory, "Fun")
        with_food = await _txn(factory, journal, "Out", "1", utc(2026, 1, 1), tags=[food])
        with_both = await _txn(
            factory, journal, "Out", "2", utc(2026, 1, 2), tags=[food, rent]
        )
        await _txn(factory, journal, "Out", "3", utc(2026, 1, 3), tags=[fun])
        await _txn(factory, journal, "Out", "4", utc(2026, 1, 4))

        found = await factory.transaction_repository().find_matching(
            TransactionFilter(journal.id, tag_ids=(food.id, rent.id)),
        )

        assert found == [with_both, with_food]

    async def test_note_search_is_case_insensitive_substring(self, factory):
        journal = await _journal(factory)
        coffee = await _txn(
            factory, journal, "Out", "1", utc(2026, 1, 1), note="Morning COFFEE"
        )
        await _txn(factory, journal, "Out", "2", utc(2026, 1, 2), note="Tea")
        await _txn(factory, journal, "Out", "3", utc(2026, 1, 3))
        percent = await _txn(
            factory, journal, "Out", "4", utc(2026, 1, 4), note="100% juice"
        )
        repo = factory.transaction_repository()

        assert await repo.find_matching(
            TransactionFilter(journal.id, note_search=" coffee "),
        ) == [coffee]
        assert await repo.find_matching(
            TransactionFilter(journal.id, note_search="0%"),
        ) == [percent]

    async def test_find_page(self, factory):
        journal = await _journal(factory)
        created = [
            await _txn(factory, journal, "Out", str(day), utc(2026, 1, day))
            for day in range(1, 6)
        ]
        newest_first = list(reversed(created))
        repo = factory.transaction_repository()
        criteria = TransactionFilter(journal.id)

        assert await repo.find_page(criteria, 1, 2) == newest_first[:2]
        assert await repo.find_page(criteria, 3, 2) == newest_first[4:]
        assert await repo.find_page(criteria, 4, 2) == []
