"""Repository behaviour that depends on PostgreSQL specifics.

Runs against an ephemeral Testcontainers instance; skipped unless
--run-integration (or RUN_INTEGRATION=1) is given.
"""

from decimal import Decimal

import pytest

from okozukai.domain.budgeting.entities import Journal, Tag, Transaction
from okozukai.domain.budgeting.exceptions import DuplicateTagError
from okozukai.domain.budgeting.value_objects import TransactionFilter, TransactionType
from okozukai.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.database import (  # noqa: F401
    pg_engine,
    pg_session,
    postgres_container,
)
from tests.shared.fixtures.factories import utc

pytestmark = pytest.mark.integration


@pytest.fixture
def factory(pg_session):  # noqa: F811
    return SQLAlchemyRepositoryFactory(pg_session)


async def test_transaction_roundtrip_keeps_timezone_and_cents(factory):
    journal = Journal.create("Household", "USD")
    await factory.journal_repository().save(journal)
    tag = Tag.create("Food", "#6366f1")
    await factory.tag_repository().save(tag)
    txn = Transaction(
        journal_id=journal.id,
        type=TransactionType.OUT,
        amount=Decimal("1234.5"),
        occurred_at=utc(2026, 1, 5),
        note="Weekly shop",
        tags=[tag],
    )
    await factory.transaction_repository().save(txn)

    loaded = await factory.transaction_repository().find_by_id(txn.id)

    assert loaded.amount == Decimal("1234.50")
    assert loaded.occurred_at == utc(2026, 1, 5)
    assert loaded.tags == (tag,)


async def test_note_search_uses_ilike(factory):
    journal = Journal.create("Household", "USD")
    await factory.journal_repository().save(journal)
    txn = Transaction(
        journal_id=journal.id,
        type=TransactionType.OUT,
        amount=Decimal("3"),
        occurred_at=utc(2026, 1, 5),
        note="Café au LAIT",
    )
    await factory.transaction_repository().save(txn)

    found = await factory.transaction_repository().find_matching(
        TransactionFilter(journal.id, note_search="au lait"),
    )

    assert found == [txn]


async def test_unique_tag_name_constraint(factory, pg_session):  # noqa: F811
    await factory.tag_repository().save(Tag.create("Food", "#6366f1"))
    await pg_session.commit()

    with pytest.raises(DuplicateTagError):
        await factory.tag_repository().save(Tag.create("Food", "#f97316"))
