"""Repository tests for monthly income on SQLite."""

import pytest

from finplan.domain.transactions import TransactionType
from finplan.infrastructure.persistence.sqlalchemy.repositories import (
    IncomeAggregateRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import TestUserFactory, salary_income, usd


async def _saved_march(session_maker):
    aggregate = salary_income()
    aggregate.add_income(usd(3000), "Salary", recurring=1)
    aggregate.add_income(usd(250), "Freelance")
    async with session_maker() as session:
        await IncomeAggregateRepositorySQLAlchemy(session).save(aggregate)
    return aggregate


class TestIncomeRepository:
    @pytest.mark.asyncio
    async def test_roundtrip(self, session_maker):
        aggregate = await _saved_march(session_maker)

        async with session_maker() as session:
            loaded = await IncomeAggregateRepositorySQLAlchemy(session).find_by_id(
                aggregate.id,
            )

        assert loaded.income.month == 3
        assert loaded.income.year == 2025
        assert loaded.income.currency.code == "USD"
        assert loaded.total == usd(3250)
        assert [(e.name, e.recurring) for e in loaded.entries] == [
            ("Salary", 1),
            ("Freelance", 0),
        ]
        assert all(e.type == TransactionType.INCOME for e in loaded.entries)

    @pytest.mark.asyncio
    async def test_find_by_month_is_user_and_period_scoped(self, session_maker):
        march = await _saved_march(session_maker)
        april = salary_income(month=4)
        foreign = salary_income(TestUserFactory.SECONDARY_ID)
        async with session_maker() as session:
            repo = IncomeAggregateRepositorySQLAlchemy(session)
            await repo.save(april)
            await repo.save(foreign)

        async with session_maker() as session:
            repo = IncomeAggregateRepositorySQLAlchemy(session)
            found = await repo.find_by_month(TestUserFactory.DEFAULT_ID, 3, 2025)
            missing = await repo.find_by_month(TestUserFactory.DEFAULT_ID, 5, 2025)

        assert found.id == march.id
        assert missing is None

    @pytest.mark.asyncio
    async def test_only_changed_entries_are_written(
        self,
        session_maker,
        statement_log,
    ):
        aggregate = await _saved_march(session_maker)
        async with session_maker() as session:
            loaded = await IncomeAggregateRepositorySQLAlchemy(session).find_by_id(
                aggregate.id,
            )
        salary, freelance = loaded.entries
        loaded.update_income(salary.id, amount=usd(3100))
        loaded.remove_income(freelance.id)
        loaded.add_income(usd(40), "Tips")
        statement_log.clear()

        async with session_maker() as session:
            await IncomeAggregateRepositorySQLAlchemy(session).save(loaded)

        assert statement_log.count("INSERT INTO transactions") == 1
        assert statement_log.count("INSERT INTO income_transactions") == 1
        assert statement_log.count("UPDATE transactions") == 1
        assert statement_log.count("DELETE FROM income_transactions") == 1
        assert statement_log.count("DELETE FROM transactions") == 1

        async with session_maker() as session:
            reloaded = await IncomeAggregateRepositorySQLAlchemy(session).find_by_id(
                aggregate.id,
            )
        assert [e.name for e in reloaded.entries] == ["Salary", "Tips"]
        assert reloaded.total == usd(3140)
