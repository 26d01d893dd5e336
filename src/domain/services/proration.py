"""Domain services splitting household expenses by income."""

from collections.abc import Sequence

from src.domain.models import (
    Expense,
    ExpenseScope,
    HouseholdSummary,
    Member,
    ProrationResult,
)


def calculate_proration(
    members: Sequence[Member],
    expenses: Sequence[Expense],
) -> list[ProrationResult]:
    """Compute each member's share of household expenses.

    Shared expenses are split proportionally to income. When nobody declares
    income the split is equal. Individual expenses are added to the assigned
    member only; those without a current assignee count for nobody.

    Args:
        members: Members of the home, in display order.
        expenses: Expenses of the home.

    Returns:
        list[ProrationResult]: One result per member, in input order. Empty
        when there are no members.
    """
    if not members:
        return []

    income_total = total_income(members)
    shared_total = total_shared_expenses(expenses)

    results = []
    for member in members:
        if income_total > 0:
            percentage = member.monthly_income / income_total
        else:
            percentage = 1 / len(members)
        individual_total = sum(
            (
                expense.amount
                for expense in expenses
                if expense.scope == ExpenseScope.INDIVIDUAL
                and expense.member_id_assigned == member.id
            ),
            0.0,
        )
        results.append(
            ProrationResult(
                member_id=member.id,
                member_name=member.name,
                proportional_percentage=percentage,
                assigned_amount=percentage * shared_total + individual_total,
            )
        )
    return results


def total_income(members: Sequence[Member]) -> float:
    """Return the sum of member incomes."""
    return sum((member.monthly_income for member in members), 0.0)


def total_shared_expenses(expenses: Sequence[Expense]) -> float:
    """Return the sum of SHARED expense amounts."""
    return _sum_scope(expenses, ExpenseScope.SHARED)


def total_individual_expenses(expenses: Sequence[Expense]) -> float:
    """Return the sum of INDIVIDUAL expense amounts, orphaned included."""
    return _sum_scope(expenses, ExpenseScope.INDIVIDUAL)


def find_orphaned_expenses(
    members: Sequence[Member],
    expenses: Sequence[Expense],
) -> list[Expense]:
    """Return individual expenses that no current member pays for.

    Args:
        members: Current members of the home.
        expenses: Expenses of the home.

    Returns:
        list[Expense]: INDIVIDUAL expenses with a missing or unknown assignee.
    """
    member_ids = {member.id for member in members}
    return [
        expense
        for expense in expenses
        if expense.scope == ExpenseScope.INDIVIDUAL
        and expense.member_id_assigned not in member_ids
    ]


def compute_household_summary(
    members: Sequence[Member],
    expenses: Sequence[Expense],
) -> HouseholdSummary:
    """Compute the dashboard headline figures.

    Args:
        members: Members of the home.
        expenses: Expenses of the home.

    Returns:
        HouseholdSummary: Income, expense totals, and counts.
    """
    shared = total_shared_expenses(expenses)
    individual = total_individual_expenses(expenses)
    return HouseholdSummary(
        total_income=total_income(members),
        total_expenses=shared + individual,
        shared_expenses=shared,
        individual_expenses=individual,
        member_count=len(members),
        expense_count=len(expenses),
    )


def _sum_scope(expenses: Sequence[Expense], scope: ExpenseScope) -> float:
    return sum(
        (expense.amount for expense in expenses if expense.scope == scope),
        0.0,
    )


__all__ = [
    "calculate_proration",
    "total_income",
    "total_shared_expenses",
    "total_individual_expenses",
    "find_orphaned_expenses",
    "compute_household_summary",
]
