"""Pure functions for ledger calculations.

This module contains the functional core for working with balances:
- No I/O operations (no console, no files)
- No side effects
- Amounts change only through the public Money operations; raw ints are
  read only for comparisons

All amounts are in minor units (Money type).
"""

import operator
from collections.abc import Iterable
from functools import reduce

from pennies.domain.models import Money, add, map, subtract, to_int, zero


def total(amounts: Iterable[Money]) -> Money:
    """Sum a collection of amounts.

    Args:
        amounts: Amounts to sum. May be empty.

    Returns:
        The sum, or zero() for no amounts.
    """
    return reduce(add, amounts, zero())


def negate(m: Money) -> Money:
    return map(operator.neg, m)


def scale(m: Money, factor: int) -> Money:
    """Multiply an amount by an integer factor."""
    return map(lambda value: value * factor, m)


def clamp_at_zero(m: Money) -> Money:
    """Replace a negative balance with zero."""
    return map(lambda value: max(value, 0), m)


def net(income: Iterable[Money], expenses: Iterable[Money]) -> Money:
    """Calculate total income less total expenses.

    Args:
        income: Incoming amounts.
        expenses: Outgoing amounts, given as positive values.

    Returns:
        Net amount (negative when expenses exceed income).
    """
    return subtract(total(income), total(expenses))


def remaining(budget: Money, allocations: Iterable[Money]) -> Money:
    """Calculate what is left of a budget after allocations.

    Args:
        budget: Total budget.
        allocations: Amounts already allocated.

    Returns:
        Remaining budget (can be negative if over-allocated).
    """
    return subtract(budget, total(allocations))


def transfer(
    amount: Money,
    source: Money,
    target: Money,
) -> tuple[Money, Money, str | None]:
    """Calculate moving money from one balance to another.

    Args:
        amount: Amount to move.
        source: Balance the amount is taken from.
        target: Balance the amount is added to.

    Returns:
        Tuple of (new_source, new_target, error_message). On error both
        balances are returned unchanged.
    """
    if to_int(amount) <= 0:
        return source, target, "Amount must be positive"

    if to_int(amount) > to_int(source):
        return source, target, f"Can't transfer more than available (only {to_int(source)})"

    new_source = subtract(source, amount)
    new_target = add(target, amount)

    return new_source, new_target, None


def is_balanced(before: Iterable[Money], after: Iterable[Money]) -> bool:
    """Check that money was moved, not created or destroyed."""
    return subtract(total(before), total(after)) == zero()
