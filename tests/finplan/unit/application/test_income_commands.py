"""Unit tests for income commands."""

from decimal import Decimal
from uuid import uuid4

import pytest

from finplan.application.commands.income import (
    AddIncomeCommand,
    RemoveIncomeCommand,
    UpdateIncomeCommand,
)
from finplan.domain.income import IncomeAggregate, IncomeNotFoundError
from finplan.domain.shared.exceptions import CurrencyMismatchError
from finplan.domain.shared.time import today_utc
from finplan.domain.shared.value_objects import Money
from tests.shared.fixtures.factories import (
    TestUserFactory,
    salary_income,
    usd,
)
from tests.shared.fixtures.repositories import make_repository


class TestAddIncomeCommand:
    @pytest.mark.asyncio
    async def test_first_entry_opens_the_month(self, current_user):
        repo = make_repository()

        entry = await AddIncomeCommand(repo, current_user).execute(
            amount=usd(3000),
            name="Salary",
            month=3,
            year=2025,
        )

        repo.find_by_month.assert_awaited_once_with(current_user.user_id, 3, 2025)
        saved = repo.save.await_args.args[0]
        assert isinstance(saved, IncomeAggregate)
        assert saved.income.month == 3
        assert saved.income.currency.code == "USD"
        assert saved.entries == [entry]

    @pytest.mark.asyncio
    async def test_appends_to_existing_month(self, current_user):
        march = salary_income()
        march.add_income(usd(3000), "Salary")
        repo = make_repository(march)

        await AddIncomeCommand(repo, current_user).execute(
            amount=usd(200),
            name="Side job",
            month=3,
            year=2025,
        )

        repo.save.assert_awaited_once_with(march)
        assert march.total == usd(3200)

    @pytest.mark.asyncio
    async def test_defaults_to_current_month(self, current_user):
        repo = make_repository()

        await AddIncomeCommand(repo, current_user).execute(amount=usd(10), name="Tip")

        today = today_utc()
        repo.find_by_month.assert_awaited_once_with(
            current_user.user_id,
            today.month,
            today.year,
        )

    @pytest.mark.asyncio
    async def test_other_currency_is_not_saved(self, current_user):
        repo = make_repository(salary_income())

        with pytest.raises(CurrencyMismatchError):
            await AddIncomeCommand(repo, current_user).execute(
                amount=Money(Decimal(50), "EUR"),
                name="Refund",
                month=3,
                year=2025,
            )

        repo.save.assert_not_awaited()


class TestUpdateAndRemoveIncome:
    @pytest.mark.asyncio
    async def test_update_entry(self, current_user):
        aggregate = salary_income()
        entry = aggregate.add_income(usd(3000), "Salary")
        repo = make_repository(aggregate)

        updated = await UpdateIncomeCommand(repo, current_user).execute(
            aggregate.id,
            entry.id,
            amount=usd(3100),
        )

        assert updated.amount == usd(3100)
        repo.save.assert_awaited_once_with(aggregate)

    @pytest.mark.asyncio
    async def test_remove_entry(self, current_user):
        aggregate = salary_income()
        entry = aggregate.add_income(usd(3000), "Salary")
        repo = make_repository(aggregate)

        await RemoveIncomeCommand(repo, current_user).execute(aggregate.id, entry.id)

        assert aggregate.entries == []
        repo.save.assert_awaited_once_with(aggregate)

    @pytest.mark.asyncio
    async def test_other_users_income_is_not_found(self, current_user):
        aggregate = salary_income(user_id=TestUserFactory.SECONDARY_ID)
        entry = aggregate.add_income(usd(3000), "Salary")
        repo = make_repository(aggregate)

        with pytest.raises(IncomeNotFoundError):
            await RemoveIncomeCommand(repo, current_user).execute(
                aggregate.id,
                entry.id,
            )

        repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_income_is_not_found(self, current_user):
        repo = make_repository()

        with pytest.raises(IncomeNotFoundError):
            await UpdateIncomeCommand(repo, current_user).execute(uuid4(), uuid4())
