"""Demo data seeding for Okozukai.

Loads a "Personal Budget" journal (USD), eight tags and six months of
sample transactions. Seeding is skipped when any transaction exists;
otherwise leftover journals and tags are cleared first.

Usage:
    okozukai seed
    # or
    python -m okozukai_demo.seed
"""

import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from okozukai.domain.budgeting.entities import Journal, Tag, Transaction
from okozukai.infrastructure.persistence.sqlalchemy.init_db import create_tables
from okozukai.infrastructure.persistence.sqlalchemy.models import TransactionModel
from okozukai.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from okozukai.presentation.api.dependencies import get_engine, get_session_maker
from okozukai_demo.data import (
    DEMO_JOURNAL_CURRENCY,
    DEMO_JOURNAL_NAME,
    DEMO_TAGS,
    DEMO_TRANSACTIONS,
)

logger = logging.getLogger(__name__)


@dataclass
class SeedStats:
    """Statistics about what was seeded."""

    skipped: bool
    tags_created: int = 0
    journals_created: int = 0
    transactions_created: int = 0


async def _has_transactions(session: AsyncSession) -> bool:
    result = await session.execute(select(func.count()).select_from(TransactionModel))
    return (result.scalar() or 0) > 0


async def _clear_journals_and_tags(factory: SQLAlchemyRepositoryFactory) -> None:
    journal_repo = factory.journal_repository()
    tag_repo = factory.tag_repository()

    for journal in await journal_repo.find_all():
        await journal_repo.delete(journal.id)
    for tag in await tag_repo.find_all():
        await tag_repo.detach_from_transactions(tag.id)
        await tag_repo.delete(tag.id)


async def seed_demo_data(session: AsyncSession) -> SeedStats:
    """Populate the database with demo data and commit.

    Parameters
    ----------
    session
        Database session; committed on success, rolled back on failure

    Returns
    -------
    Statistics about what was seeded
    """
    if await _has_transactions(session):
        logger.info("Seed skipped: transactions already exist")
        return SeedStats(skipped=True)

    factory = SQLAlchemyRepositoryFactory(session)
    tag_repo = factory.tag_repository()
    transaction_repo = factory.transaction_repository()

    try:
        await _clear_journals_and_tags(factory)

        tags: dict[str, Tag] = {}
        for tag_def in DEMO_TAGS:
            tag = Tag.create(tag_def.name, tag_def.color)
            await tag_repo.save(tag)
            tags[tag.name] = tag

        journal = Journal.create(DEMO_JOURNAL_NAME, DEMO_JOURNAL_CURRENCY)
        await factory.journal_repository().save(journal)

        for txn_def in DEMO_TRANSACTIONS:
            transaction = Transaction.create(
                journal_id=journal.id,
                journal_is_closed=journal.is_closed,
                type=txn_def.type,
                amount=txn_def.amount,
                occurred_at=txn_def.occurred_at,
                note=txn_def.note,
            )
            transaction.set_tags(tags[name] for name in txn_def.tags)
            await transaction_repo.save(transaction)

        await session.commit()
    except Exception:
        await session.rollback()
        raise

    stats = SeedStats(
        skipped=False,
        tags_created=len(tags),
        journals_created=1,
        transactions_created=len(DEMO_TRANSACTIONS),
    )
    logger.info(
        "Seed complete: %d tags, %d journal, %d transactions",
        stats.tags_created,
        stats.journals_created,
        stats.transactions_created,
    )
    return stats


async def run_seed() -> SeedStats:
    """Create missing tables, then seed using the shared session maker."""
    engine = get_engine()
    try:
        await create_tables(engine)
        async with get_session_maker()() as session:
            return await seed_demo_data(session)
    finally:
        await engine.dispose()


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    asyncio.run(run_seed())


if __name__ == "__main__":
    main()
