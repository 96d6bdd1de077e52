"""Tests for the Goal entity and GoalAggregate."""

import random
from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from finplan.domain.goals import (
    Goal,
    GoalAggregate,
    GoalInvalidTargetAmountError,
    GoalTransactionNotFoundError,
)
from finplan.domain.shared.exceptions import (
    CurrencyMismatchError,
    InsufficientBalanceError,
    InvalidAmountError,
    RequiredFieldError,
)
from finplan.domain.shared.value_objects import Currency, Money
from finplan.domain.transactions import Transaction, TransactionType
from tests.shared.fixtures.factories import usd, vacation_goal


class TestGoalContributions:
    def test_contributions_add_up(self):
        aggregate = vacation_goal(target=usd(5000))

        for amount in (100, 150, 75):
            aggregate.contribute(usd(amount))

        assert aggregate.total_contributed.amount == Decimal(325)
        assert aggregate.remaining_amount.amount == Decimal(4675)

    def test_contribution_defaults_and_progress(self):
        aggregate = vacation_goal(target=usd(1000))

        transaction = aggregate.contribute(usd(250))

        assert transaction.type == TransactionType.GOAL_CONTRIBUTION
        assert transaction.name == "Goal Contribution"
        assert transaction.description == "Contribution to Vacation"
        assert aggregate.goal.current_amount == usd(250)
        assert aggregate.progress_ratio == Decimal("0.2500")

    @pytest.mark.parametrize("amount", [0, -5])
    def test_non_positive_contribution_rejected(self, amount):
        aggregate = vacation_goal()

        with pytest.raises(InvalidAmountError):
            aggregate.contribute(usd(amount))

        assert aggregate.transactions == []

    def test_foreign_currency_rejected(self):
        aggregate = vacation_goal()

        with pytest.raises(CurrencyMismatchError):
            aggregate.contribute(Money(10, "EUR"))

    def test_income_counts_as_inflow_and_outcome_as_outflow(self):
        aggregate = vacation_goal()
        user_id = aggregate.user_id
        aggregate.children.add(
            Transaction.new(user_id, usd(300), TransactionType.INCOME, "Bonus"),
        )
        aggregate.children.add(
            Transaction.new(user_id, usd(50), TransactionType.OUTCOME, "Fees"),
        )

        assert aggregate.total_contributed == usd(250)


class TestGoalWithdrawals:
    def test_withdraw_more_than_balance_fails(self):
        aggregate = vacation_goal()
        aggregate.contribute(usd(200))

        with pytest.raises(InsufficientBalanceError) as exc_info:
            aggregate.withdraw(usd(250))

        assert exc_info.value.requested.amount == Decimal(250)
        assert exc_info.value.available.amount == Decimal(200)
        assert aggregate.total_contributed.amount == Decimal(200)
        assert len(aggregate.transactions) == 1

    def test_withdraw_exact_balance_allowed(self):
        aggregate = vacation_goal()
        aggregate.contribute(usd(200))

        transaction = aggregate.withdraw(usd(200))

        assert transaction.type == TransactionType.GOAL_WITHDRAWAL
        assert transaction.name == "Goal Withdrawal"
        assert aggregate.total_contributed.is_zero()

    def test_withdraw_from_empty_goal_fails(self):
        with pytest.raises(InsufficientBalanceError):
            vacation_goal().withdraw(usd(1))

    @pytest.mark.parametrize("seed", range(20))
    def test_balance_equals_contributions_minus_withdrawals(self, seed):
        rng = random.Random(seed)
        aggregate = vacation_goal()
        contributed = Decimal(0)
        withdrawn = Decimal(0)

        for _ in range(40):
            amount = usd(rng.randint(1, 300))
            if rng.random() < 0.5:
                aggregate.contribute(amount)
                contributed += amount.amount
                continue

            available = aggregate.total_contributed
            if amount > available:
                with pytest.raises(InsufficientBalanceError):
                    aggregate.withdraw(amount)
            else:
                aggregate.withdraw(amount)
                withdrawn += amount.amount

            assert not aggregate.total_contributed.is_negative()

        assert aggregate.total_contributed.amount == contributed - withdrawn


class TestGoalRemaining:
    @pytest.mark.parametrize("contributed", [0, 4999, 5000, 5001, 12000])
    def test_remaining_never_negative(self, contributed):
        aggregate = vacation_goal(target=usd(5000))
        if contributed:
            aggregate.contribute(usd(contributed))

        assert not aggregate.remaining_amount.is_negative()
        expected = max(Decimal(5000) - Decimal(contributed), Decimal(0))
        assert aggregate.remaining_amount.amount == expected

    def test_completion_and_overdue(self):
        aggregate = vacation_goal(target=usd(100))
        due = aggregate.goal.due_date

        assert aggregate.goal.is_overdue(due + timedelta(days=1))
        aggregate.contribute(usd(100))

        assert aggregate.goal.is_completed()
        assert not aggregate.goal.is_overdue(due + timedelta(days=1))

    def test_goal_without_target(self):
        goal = Goal.new(user_id=uuid4(), title="Rainy day")
        aggregate = GoalAggregate.create(goal)
        aggregate.contribute(Money(10))

        assert goal.currency == Currency.default()
        assert aggregate.remaining_amount.is_zero()
        assert aggregate.progress_ratio == Decimal(0)
        assert not goal.is_completed()


class TestGoalTransactionRemoval:
    def test_remove_withdrawal_restores_balance(self):
        aggregate = vacation_goal()
        aggregate.contribute(usd(100))
        withdrawal = aggregate.withdraw(usd(40))

        aggregate.remove_transaction(withdrawal.id)

        assert aggregate.total_contributed == usd(100)
        assert aggregate.goal.current_amount == usd(100)

    def test_remove_contribution_that_funds_withdrawal_fails(self):
        aggregate = vacation_goal()
        contribution = aggregate.contribute(usd(100))
        aggregate.withdraw(usd(80))

        with pytest.raises(InsufficientBalanceError):
            aggregate.remove_transaction(contribution.id)

        assert contribution in aggregate.children

    def test_remove_unknown_transaction_raises(self):
        with pytest.raises(GoalTransactionNotFoundError):
            vacation_goal().remove_transaction(uuid4())



class TestGoalTransactionUpdate:
    """Editing a transaction re-syncs the goal progress."""

    def test_raise_contribution(self):
        aggregate = vacation_goal()
        contribution = aggregate.contribute(usd(100))

        aggregate.update_transaction(contribution.id, amount=usd(250), name="Bonus")

        assert aggregate.total_contributed == usd(250)
        assert aggregate.goal.current_amount == usd(250)
        assert contribution.name == "Bonus"

    def test_update_of_loaded_transaction_is_tracked(self):
        seed = vacation_goal()
        contribution = seed.contribute(usd(100))
        aggregate = GoalAggregate.reconstitute(seed.goal, [contribution])

        aggregate.update_transaction(contribution.id, amount=usd(60))

        assert aggregate.children.pending_changes().updates == (contribution,)
        assert aggregate.goal.current_amount == usd(60)

    def test_lowering_contribution_below_withdrawals_fails(self):
        aggregate = vacation_goal()
        contribution = aggregate.contribute(usd(100))
        aggregate.withdraw(usd(80))

        with pytest.raises(InsufficientBalanceError):
            aggregate.update_transaction(contribution.id, amount=usd(50))

        assert contribution.amount == usd(100)
        assert aggregate.total_contributed == usd(20)

    def test_raising_withdrawal_beyond_balance_fails(self):
        aggregate = vacation_goal()
        aggregate.contribute(usd(100))
        withdrawal = aggregate.withdraw(usd(40))

        aggregate.update_transaction(withdrawal.id, amount=usd(100))
        assert aggregate.total_contributed == usd(0)

        with pytest.raises(InsufficientBalanceError):
            aggregate.update_transaction(withdrawal.id, amount=usd("100.01"))

    def test_non_positive_amount_rejected(self):
        aggregate = vacation_goal()
        contribution = aggregate.contribute(usd(100))

        with pytest.raises(InvalidAmountError):
            aggregate.update_transaction(contribution.id, amount=usd(0))

    def test_update_unknown_transaction_raises(self):
        with pytest.raises(GoalTransactionNotFoundError):
            vacation_goal().update_transaction(uuid4(), name="x")


class TestGoalDetails:
    def test_update_details(self):
        aggregate = vacation_goal()

        aggregate.update_goal_details(
            title="Japan trip",
            target_amount=usd(8000),
            due_date=date(2031, 4, 1),
        )

        assert aggregate.goal.title == "Japan trip"
        assert aggregate.goal.target_amount == usd(8000)
        assert aggregate.goal.due_date == date(2031, 4, 1)

    def test_non_positive_target_rejected(self):
        aggregate = vacation_goal()

        with pytest.raises(GoalInvalidTargetAmountError):
            aggregate.update_goal_details(target_amount=usd(0))

    def test_blank_title_rejected(self):
        aggregate = vacation_goal()

        with pytest.raises(RequiredFieldError):
            aggregate.update_goal_details(title=" ")

    def test_target_currency_change_conflicts_with_progress(self):
        aggregate = vacation_goal()

        with pytest.raises(CurrencyMismatchError):
            aggregate.update_goal_details(target_amount=Money(100, "EUR"))
