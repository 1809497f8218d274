"""Tests for JournalService."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from okozukai.application.services import JournalService
from okozukai.domain.budgeting.entities import Journal
from okozukai.domain.budgeting.exceptions import JournalNotClosedError
from okozukai.domain.shared.exceptions import ConflictError, ValidationError


class TestJournalService:
    def setup_method(self):
        self.mock_journal_repo = Mock()
        self.mock_journal_repo.save = AsyncMock()
        self.mock_journal_repo.delete = AsyncMock()
        self.mock_journal_repo.find_by_id = AsyncMock(return_value=None)
        self.mock_journal_repo.find_all = AsyncMock(return_value=[])
        self.service = JournalService(journal_repository=self.mock_journal_repo)

    async def test_create_journal_saves_normalized_journal(self):
        journal = await self.service.create_journal(" Household ", "usd")

        assert journal.name == "Household"
        assert journal.primary_currency == "USD"
        self.mock_journal_repo.save.assert_awaited_once_with(journal)

    async def test_create_journal_with_bad_currency_saves_nothing(self):
        with pytest.raises(ValidationError):
            await self.service.create_journal("Household", "DOLLARS")

        self.mock_journal_repo.save.assert_not_awaited()

    async def test_rename_unknown_journal_returns_none(self):
        assert await self.service.rename_journal(uuid4(), "New") is None
        self.mock_journal_repo.save.assert_not_awaited()

    async def test_close_and_reopen(self):
        journal = Journal.create("Household", "USD")
        self.mock_journal_repo.find_by_id = AsyncMock(return_value=journal)

        closed = await self.service.close_journal(journal.id)
        assert closed.is_closed is True

        reopened = await self.service.reopen_journal(journal.id)
        assert reopened.is_closed is False
        assert self.mock_journal_repo.save.await_count == 2

    async def test_delete_open_journal_is_a_conflict(self):
        journal = Journal.create("Household", "USD")
        self.mock_journal_repo.find_by_id = AsyncMock(return_value=journal)

        with pytest.raises(JournalNotClosedError) as exc_info:
            await self.service.delete_journal(journal.id)

        assert isinstance(exc_info.value, ConflictError)
        self.mock_journal_repo.delete.assert_not_awaited()

    async def test_delete_closed_journal(self):
        journal = Journal.create("Household", "USD")
        journal.close()
        self.mock_journal_repo.find_by_id = AsyncMock(return_value=journal)

        assert await self.service.delete_journal(journal.id) is True
        self.mock_journal_repo.delete.assert_awaited_once_with(journal.id)

    async def test_delete_unknown_journal_returns_false(self):
        assert await self.service.delete_journal(uuid4()) is False

    def test_from_factory_uses_journal_repository(self):
        factory = Mock()

        JournalService.from_factory(factory)

        factory.journal_repository.assert_called_once_with()
