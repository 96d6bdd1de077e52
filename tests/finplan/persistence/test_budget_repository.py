"""
Repository tests for BudgetAggregateRepositorySQLAlchemy.

Covers the delta writes planned from the spending collection, save
atomicity, soft and hard deletes, and the find_many query options.
"""

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from finplan.domain.shared.query import FindManyOptions, Pagination, SortField
from finplan.domain.transactions import Transaction, TransactionType
from finplan.infrastructure.persistence.sqlalchemy.models import (
    BudgetModel,
    BudgetTransactionModel,
    TransactionModel,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories import (
    BudgetAggregateRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import TestUserFactory, groceries_budget, usd


async def _count(session_maker, model) -> int:
    async with session_maker() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


async def _saved_budget(session_maker, *spending: str):
    aggregate = groceries_budget()
    for name in spending:
        aggregate.spend(usd(10), name=name)
    async with session_maker() as session:
        await BudgetAggregateRepositorySQLAlchemy(session).save(aggregate)
    return aggregate


async def _load(session_maker, budget_id):
    async with session_maker() as session:
        return await BudgetAggregateRepositorySQLAlchemy(session).find_by_id(
            budget_id,
        )


class TestSaveAndLoad:
    @pytest.mark.asyncio
    async def test_roundtrip(self, session_maker):
        aggregate = await _saved_budget(session_maker, "Market", "Bakery")

        loaded = await _load(session_maker, aggregate.id)

        assert loaded is not None
        assert loaded.id == aggregate.id
        assert loaded.user_id == TestUserFactory.DEFAULT_ID
        assert loaded.budget.name == "Groceries"
        assert loaded.budget.amount == usd(500)
        assert [t.name for t in loaded.spending] == ["Market", "Bakery"]
        assert loaded.spent == usd(20)
        assert not loaded.children.has_changes

    @pytest.mark.asyncio
    async def test_save_clears_pending_changes(self, session_maker):
        aggregate = await _saved_budget(session_maker, "Market")

        assert not aggregate.children.has_changes

    @pytest.mark.asyncio
    async def test_root_update(self, session_maker):
        aggregate = await _saved_budget(session_maker)
        aggregate.update_budget(name="Food", amount=usd(650))

        async with session_maker() as session:
            await BudgetAggregateRepositorySQLAlchemy(session).save(aggregate)

        loaded = await _load(session_maker, aggregate.id)
        assert loaded.budget.name == "Food"
        assert loaded.budget.amount == usd(650)
        assert await _count(session_maker, BudgetModel) == 1

    @pytest.mark.asyncio
    async def test_child_update(self, session_maker):
        aggregate = await _saved_budget(session_maker, "Market")
        loaded = await _load(session_maker, aggregate.id)
        loaded.update_spending(loaded.spending[0].id, amount=usd(42))

        async with session_maker() as session:
            await BudgetAggregateRepositorySQLAlchemy(session).save(loaded)

        reloaded = await _load(session_maker, aggregate.id)
        assert reloaded.spent == usd(42)

    @pytest.mark.asyncio
    async def test_missing_id(self, session_maker):
        assert await _load(session_maker, TestUserFactory.SECONDARY_ID) is None


class TestDeltaWrites:
    @pytest.mark.asyncio
    async def test_two_added_and_one_removed(self, session_maker, statement_log):
        aggregate = await _saved_budget(session_maker, "Old")
        loaded = await _load(session_maker, aggregate.id)
        loaded.spend(usd(5), name="New 1")
        loaded.spend(usd(6), name="New 2")
        loaded.remove_spending(loaded.spending[0].id)
        statement_log.clear()

        async with session_maker() as session:
            await BudgetAggregateRepositorySQLAlchemy(session).save(loaded)

        assert statement_log.count("INSERT INTO transactions") == 2
        assert statement_log.count("INSERT INTO budget_transactions") == 2
        assert statement_log.count("DELETE FROM budget_transactions") == 1
        assert statement_log.count("DELETE FROM transactions") == 1
        assert statement_log.count("UPDATE transactions") == 0
        # one transaction: a single BEGIN before and a single COMMIT after
        assert statement_log.count("BEGIN") == 1
        assert statement_log.statements[0] == "BEGIN"
        assert statement_log.statements[-1] == "COMMIT"
        assert statement_log.count("COMMIT") == 1

        reloaded = await _load(session_maker, aggregate.id)
        assert [t.name for t in reloaded.spending] == ["New 1", "New 2"]
        assert await _count(session_maker, TransactionModel) == 2

    @pytest.mark.asyncio
    async def test_added_then_removed_writes_no_child(
        self,
        session_maker,
        statement_log,
    ):
        aggregate = groceries_budget()
        transient = aggregate.spend(usd(5))
        aggregate.remove_spending(transient.id)

        async with session_maker() as session:
            await BudgetAggregateRepositorySQLAlchemy(session).save(aggregate)

        assert statement_log.count("INSERT INTO transactions") == 0
        assert statement_log.count("DELETE FROM transactions") == 0
        assert statement_log.count("INSERT INTO budgets") == 1

    @pytest.mark.asyncio
    async def test_added_then_updated_is_one_insert(
        self,
        session_maker,
        statement_log,
    ):
        aggregate = groceries_budget()
        spending = aggregate.spend(usd(5), name="Draft")
        aggregate.update_spending(spending.id, name="Final")

        async with session_maker() as session:
            await BudgetAggregateRepositorySQLAlchemy(session).save(aggregate)

        assert statement_log.count("INSERT INTO transactions") == 1
        assert statement_log.count("UPDATE transactions") == 0
        loaded = await _load(session_maker, aggregate.id)
        assert [t.name for t in loaded.spending] == ["Final"]

    @pytest.mark.asyncio
    async def test_unchanged_save_touches_root_only(
        self,
        session_maker,
        statement_log,
    ):
        aggregate = await _saved_budget(session_maker, "Market")
        statement_log.clear()

        async with session_maker() as session:
            await BudgetAggregateRepositorySQLAlchemy(session).save(aggregate)

        assert statement_log.count("UPDATE budgets") == 1
        assert statement_log.count("INSERT") == 0
        assert statement_log.count("DELETE") == 0


class TestSaveAtomicity:
    @pytest.mark.asyncio
    async def test_failed_child_insert_rolls_back_everything(self, session_maker):
        aggregate = await _saved_budget(session_maker, "Market")
        loaded = await _load(session_maker, aggregate.id)
        loaded.update_budget(name="Renamed")
        loaded.spend(usd(7), name="Valid")
        # bypasses domain validation; rejected by the amount CHECK constraint
        loaded.spending_collection.add(
            Transaction.new(
                user_id=loaded.user_id,
                amount=usd(0),
                transaction_type=TransactionType.OUTCOME,
                name="Broken",
            ),
        )

        async with session_maker() as session:
            with pytest.raises(IntegrityError):
                await BudgetAggregateRepositorySQLAlchemy(session).save(loaded)

        stored = await _load(session_maker, aggregate.id)
        assert stored.budget.name == "Groceries"
        assert [t.name for t in stored.spending] == ["Market"]
        assert await _count(session_maker, TransactionModel) == 1
        assert await _count(session_maker, BudgetTransactionModel) == 1

        # the change set survives so the caller can fix and retry
        assert len(loaded.children.pending_changes().inserts) == 2


class TestDeletes:
    @pytest.mark.asyncio
    async def test_soft_delete_hides_budget(self, session_maker):
        aggregate = await _saved_budget(session_maker, "Market")

        async with session_maker() as session:
            repo = BudgetAggregateRepositorySQLAlchemy(session)
            await repo.soft_delete(aggregate)

        async with session_maker() as session:
            repo = BudgetAggregateRepositorySQLAlchemy(session)
            assert await repo.find_by_id(aggregate.id) is None
            assert await repo.find_many({"user_id": aggregate.user_id}) == []
            root_marks = await session.scalars(select(BudgetModel.deleted_at))
            child_marks = await session.scalars(select(TransactionModel.deleted_at))
            root_deleted = root_marks.all()
            child_deleted = child_marks.all()

        assert len(root_deleted) == 1
        assert len(child_deleted) == 1
        assert None not in root_deleted
        assert None not in child_deleted

    @pytest.mark.asyncio
    async def test_hard_delete_removes_rows(self, session_maker):
        aggregate = await _saved_budget(session_maker, "Market", "Bakery")

        async with session_maker() as session:
            await BudgetAggregateRepositorySQLAlchemy(session).delete(aggregate)

        assert await _count(session_maker, BudgetModel) == 0
        assert await _count(session_maker, BudgetTransactionModel) == 0
        assert await _count(session_maker, TransactionModel) == 0


class TestQueries:
    @pytest_asyncio.fixture
    async def five_budgets(self, session_maker):
        async with session_maker() as session:
            repo = BudgetAggregateRepositorySQLAlchemy(session)
            for name in ["Eta", "Alpha", "Delta", "Beta", "Gamma"]:
                await repo.save(groceries_budget(name=name))
            await repo.save(
                groceries_budget(TestUserFactory.SECONDARY_ID, name="Foreign"),
            )

    @pytest.mark.asyncio
    async def test_pagination_and_sort(self, session_maker, five_budgets):
        async with session_maker() as session:
            page = await BudgetAggregateRepositorySQLAlchemy(session).find_many(
                {"user_id": TestUserFactory.DEFAULT_ID},
                FindManyOptions(
                    pagination=Pagination(page=2, limit=2),
                    sort=(SortField("name"),),
                ),
            )

        assert [b.budget.name for b in page] == ["Delta", "Eta"]

    @pytest.mark.asyncio
    async def test_descending_sort(self, session_maker, five_budgets):
        async with session_maker() as session:
            budgets = await BudgetAggregateRepositorySQLAlchemy(session).find_many(
                {"user_id": TestUserFactory.DEFAULT_ID},
                FindManyOptions(sort=(SortField("name", "desc"),)),
            )

        assert [b.budget.name for b in budgets][:2] == ["Gamma", "Eta"]

    @pytest.mark.asyncio
    async def test_find_by_period_and_find_one(self, session_maker, five_budgets):
        async with session_maker() as session:
            repo = BudgetAggregateRepositorySQLAlchemy(session)
            march = await repo.find_by_period(TestUserFactory.DEFAULT_ID, 3, 2025)
            april = await repo.find_by_period(TestUserFactory.DEFAULT_ID, 4, 2025)
            beta = await repo.find_one(name="Beta")

        assert len(march) == 5
        assert april == []
        assert beta is not None
        assert beta.budget.name == "Beta"

    @pytest.mark.asyncio
    async def test_unknown_filter_field(self, session_maker):
        async with session_maker() as session:
            repo = BudgetAggregateRepositorySQLAlchemy(session)
            with pytest.raises(ValueError, match="Unknown"):
                await repo.find_many({"nickname": "x"})
