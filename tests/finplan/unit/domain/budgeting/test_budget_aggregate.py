"""Tests for the Budget entity and BudgetAggregate."""

from uuid import uuid4

import pytest

from finplan.domain.budgeting import (
    Budget,
    BudgetAggregate,
    BudgetCategory,
    InvalidBudgetAmountError,
    InvalidBudgetPeriodError,
    SpendingNotFoundError,
)
from finplan.domain.shared.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    RequiredFieldError,
)
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import TransactionType
from tests.shared.fixtures.factories import groceries_budget, usd


class TestBudgetValidation:
    def test_valid_budget(self):
        groceries_budget().validate()

    def test_amount_must_be_positive(self):
        with pytest.raises(InvalidBudgetAmountError):
            groceries_budget(amount=usd(0)).validate()

    @pytest.mark.parametrize(("month", "year"), [(0, 2025), (13, 2025), (5, 0)])
    def test_period_must_be_valid(self, month, year):
        with pytest.raises(InvalidBudgetPeriodError):
            groceries_budget(month=month, year=year).validate()

    def test_name_required(self):
        with pytest.raises(RequiredFieldError):
            groceries_budget(name="").validate()

    def test_defaults(self):
        budget = Budget.new(
            user_id=uuid4(),
            name="Rent",
            amount=usd(1200),
            month=1,
            year=2025,
        )

        assert budget.category == BudgetCategory.FLEXIBLE
        assert budget.color is None
        assert budget.icon is None


class TestBudgetSpending:
    """Spending totals follow the live child collection."""

    def test_spend_records_outcome_with_defaults(self):
        aggregate = groceries_budget()

        transaction = aggregate.spend(usd(40))

        assert transaction.type == TransactionType.OUTCOME
        assert transaction.name == "Spending"
        assert transaction.description == "Spending for Groceries"
        assert transaction.user_id == aggregate.user_id
        assert aggregate.children.added_items == [transaction]

    def test_spent_and_remaining(self):
        aggregate = groceries_budget(amount=usd(100))
        aggregate.spend(usd(30))
        aggregate.spend(usd("45.50"))

        assert aggregate.spent == usd("75.50")
        assert aggregate.remaining_budget == usd("24.50")
        assert not aggregate.is_over_budget

    def test_overspending_goes_negative(self):
        aggregate = groceries_budget(amount=usd(100))
        aggregate.spend(usd(130))

        assert aggregate.remaining_budget == usd(-30)
        assert aggregate.is_over_budget

    def test_remove_spending(self):
        aggregate = groceries_budget()
        first = aggregate.spend(usd(10))
        second = aggregate.spend(usd(20))

        aggregate.remove_spending(first.id)

        assert aggregate.spending == [second]
        assert aggregate.spent == usd(20)

    def test_remove_unknown_spending_raises(self):
        aggregate = groceries_budget()

        with pytest.raises(SpendingNotFoundError):
            aggregate.remove_spending(uuid4())

    def test_update_spending_marks_update_for_loaded_child(self):
        seed = groceries_budget()
        transaction = seed.spend(usd(10))
        aggregate = BudgetAggregate.reconstitute(seed.budget, [transaction])

        aggregate.update_spending(transaction.id, amount=usd(15), name="Market")

        assert aggregate.spent == usd(15)
        assert aggregate.children.updated_items[0].name == "Market"
        assert aggregate.children.pending_changes().updates == (transaction,)

    def test_update_budget_validates(self):
        aggregate = groceries_budget()

        with pytest.raises(InvalidBudgetPeriodError):
            aggregate.update_budget(month=14)

    def test_aggregate_validation_checks_children(self):
        aggregate = groceries_budget()
        aggregate.spend(usd(0))

        with pytest.raises(InvalidAmountError):
            aggregate.validate()


class TestBudgetCurrency:
    """Spending always shares the currency of the budget amount."""

    def test_spend_in_other_currency_rejected(self):
        aggregate = groceries_budget(amount=usd(100))

        with pytest.raises(CurrencyMismatchError):
            aggregate.spend(Money(10, "EUR"))

        assert aggregate.spending == []
        assert not aggregate.children.has_changes

    def test_update_spending_to_other_currency_rejected(self):
        aggregate = groceries_budget()
        transaction = aggregate.spend(usd(10))

        with pytest.raises(CurrencyMismatchError):
            aggregate.update_spending(transaction.id, amount=Money(10, "EUR"))

        assert transaction.amount == usd(10)

    def test_validate_catches_child_added_directly(self):
        aggregate = groceries_budget()
        foreign = groceries_budget(amount=Money(50, "EUR"))
        aggregate.spending_collection.add(foreign.spend(Money(5, "EUR")))

        with pytest.raises(CurrencyMismatchError):
            aggregate.validate()

    def test_changing_budget_currency_with_spending_rejected(self):
        aggregate = groceries_budget(amount=usd(100))
        aggregate.spend(usd(10))

        with pytest.raises(CurrencyMismatchError):
            aggregate.update_budget(amount=Money(100, "EUR"))

        assert aggregate.budget.amount == usd(100)

    def test_changing_budget_currency_without_spending(self):
        aggregate = groceries_budget(amount=usd(100))

        aggregate.update_budget(amount=Money(90, "EUR"))

        assert aggregate.budget.amount == Money(90, "EUR")
