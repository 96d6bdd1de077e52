"""Unit tests for budgeting commands."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from finplan.application.commands.budgeting import (
    CreateBudgetCommand,
    DeleteBudgetCommand,
    RemoveSpendingCommand,
    SpendCommand,
    UpdateBudgetCommand,
)
from finplan.domain.budgeting import (
    BudgetAggregate,
    BudgetAlreadyExistsError,
    BudgetNotFoundError,
    InvalidBudgetAmountError,
    SpendingNotFoundError,
)
from finplan.domain.shared.exceptions import CurrencyMismatchError, InvalidAmountError
from finplan.domain.shared.value_objects import Money
from tests.shared.fixtures.factories import TestUserFactory, groceries_budget, usd
from tests.shared.fixtures.repositories import make_repository


class TestCreateBudgetCommand:
    """Tests for CreateBudgetCommand."""

    @pytest.mark.asyncio
    async def test_creates_and_saves_budget(self, current_user):
        # Arrange
        repo = make_repository()
        command = CreateBudgetCommand(repo, current_user)

        # Act
        aggregate = await command.execute(
            name="Groceries",
            amount=usd(400),
            month=4,
            year=2025,
        )

        # Assert
        assert isinstance(aggregate, BudgetAggregate)
        assert aggregate.user_id == current_user.user_id
        repo.find_one.assert_awaited_once_with(
            user_id=current_user.user_id,
            name="Groceries",
            month=4,
            year=2025,
        )
        repo.save.assert_awaited_once_with(aggregate)

    @pytest.mark.asyncio
    async def test_duplicate_name_in_period_conflicts(self, current_user):
        repo = make_repository()
        repo.find_one.return_value = groceries_budget()
        command = CreateBudgetCommand(repo, current_user)

        with pytest.raises(BudgetAlreadyExistsError):
            await command.execute(name="Groceries", amount=usd(1), month=3, year=2025)

        repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_amount_is_not_saved(self, current_user):
        repo = make_repository()
        command = CreateBudgetCommand(repo, current_user)

        with pytest.raises(InvalidBudgetAmountError):
            await command.execute(name="Fun", amount=usd(0), month=3, year=2025)

        repo.save.assert_not_awaited()

    def test_from_factory(self, current_user):
        factory = MagicMock()
        factory.current_user = current_user

        command = CreateBudgetCommand.from_factory(factory)

        factory.budget_repository.assert_called_once_with()
        assert isinstance(command, CreateBudgetCommand)


class TestSpendCommand:
    @pytest.mark.asyncio
    async def test_spend_adds_transaction_and_saves(self, current_user):
        aggregate = groceries_budget(amount=usd(100))
        repo = make_repository(aggregate)
        command = SpendCommand(repo, current_user)

        transaction = await command.execute(aggregate.id, usd(30), name="Market")

        assert transaction.name == "Market"
        assert aggregate.remaining_budget == usd(70)
        repo.save.assert_awaited_once_with(aggregate)

    @pytest.mark.asyncio
    async def test_zero_spending_rejected_before_save(self, current_user):
        aggregate = groceries_budget()
        repo = make_repository(aggregate)

        with pytest.raises(InvalidAmountError):
            await SpendCommand(repo, current_user).execute(aggregate.id, usd(0))

        repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_spending_in_other_currency_is_not_saved(self, current_user):
        aggregate = groceries_budget(amount=usd(100))
        repo = make_repository(aggregate)

        with pytest.raises(CurrencyMismatchError):
            await SpendCommand(repo, current_user).execute(
                aggregate.id,
                Money(10, "EUR"),
            )

        assert aggregate.spending == []
        repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_budget_is_not_found(self, current_user):
        repo = make_repository()

        with pytest.raises(BudgetNotFoundError):
            await SpendCommand(repo, current_user).execute(uuid4(), usd(5))

    @pytest.mark.asyncio
    async def test_foreign_budget_looks_missing(self, current_user):
        aggregate = groceries_budget(user_id=TestUserFactory.SECONDARY_ID)
        repo = make_repository(aggregate)

        with pytest.raises(BudgetNotFoundError) as exc_info:
            await SpendCommand(repo, current_user).execute(aggregate.id, usd(5))

        assert exc_info.value.details == {"budget_id": str(aggregate.id)}
        assert aggregate.spending == []
        repo.save.assert_not_awaited()


class TestRemoveSpendingCommand:
    @pytest.mark.asyncio
    async def test_remove(self, current_user):
        aggregate = groceries_budget()
        transaction = aggregate.spend(usd(10))
        aggregate.children.mark_persisted()
        repo = make_repository(aggregate)

        await RemoveSpendingCommand(repo, current_user).execute(
            aggregate.id,
            transaction.id,
        )

        assert aggregate.children.pending_changes().deletes == (transaction,)
        repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_spending(self, current_user):
        aggregate = groceries_budget()
        repo = make_repository(aggregate)

        with pytest.raises(SpendingNotFoundError):
            await RemoveSpendingCommand(repo, current_user).execute(
                aggregate.id,
                uuid4(),
            )


class TestUpdateBudgetCommand:
    @pytest.mark.asyncio
    async def test_rename(self, current_user):
        aggregate = groceries_budget()
        repo = make_repository(aggregate)

        await UpdateBudgetCommand(repo, current_user).execute(
            aggregate.id,
            name="Food",
            amount=usd(650),
        )

        assert aggregate.budget.name == "Food"
        assert aggregate.budget.amount == usd(650)
        repo.save.assert_awaited_once_with(aggregate)

    @pytest.mark.asyncio
    async def test_rename_onto_existing_budget_conflicts(self, current_user):
        aggregate = groceries_budget()
        repo = make_repository(aggregate)
        repo.find_one.return_value = groceries_budget(name="Food")

        with pytest.raises(BudgetAlreadyExistsError):
            await UpdateBudgetCommand(repo, current_user).execute(
                aggregate.id,
                name="Food",
            )

        assert aggregate.budget.name == "Groceries"


class TestDeleteBudgetCommand:
    @pytest.mark.asyncio
    async def test_soft_delete_by_default(self, current_user):
        aggregate = groceries_budget()
        repo = make_repository(aggregate)

        await DeleteBudgetCommand(repo, current_user).execute(aggregate.id)

        repo.soft_delete.assert_awaited_once_with(aggregate)
        repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_permanent_delete(self, current_user):
        aggregate = groceries_budget()
        repo = make_repository(aggregate)

        await DeleteBudgetCommand(repo, current_user).execute(
            aggregate.id,
            permanent=True,
        )

        repo.delete.assert_awaited_once_with(aggregate)
        repo.soft_delete.assert_not_awaited()
