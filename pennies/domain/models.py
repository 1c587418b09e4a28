"""The Money type and its operations.

Money is an amount in minor units (e.g. pence) wrapped in a distinct type so
it can't be mixed with plain integers by accident:
- Construct with from_int() or zero()
- Unwrap with to_int()
- Combine with add(), subtract() or the map family

Amounts are backed by Python's int, which is arbitrary precision. There is no
overflow or wraparound; arithmetic is exact at any size.
"""

import operator
from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "Money",
    "add",
    "from_int",
    "map",
    "map2",
    "map3",
    "map4",
    "map5",
    "map6",
    "subtract",
    "to_int",
    "zero",
]


@dataclass(frozen=True, slots=True, repr=False)
class Money:
    """Immutable amount of money in minor units.

    Has no numeric protocol (__int__, __index__, __add__, ...), so
    `money + 1` and `int(money)` raise TypeError.
    """

    _value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never an amount
        if not isinstance(self._value, int) or isinstance(self._value, bool):
            raise TypeError(f"Money must wrap an int, got {type(self._value).__name__}")

    def __repr__(self) -> str:
        return f"Money({self._value!r})"


def zero() -> Money:
    """Return the additive identity."""
    return Money(0)


def from_int(n: int) -> Money:
    """Wrap an integer amount.

    Args:
        n: Amount in minor units. Negative values are allowed.

    Returns:
        Money holding exactly n.

    Raises:
        TypeError: If n is not an int (floats, strings and bools included).
    """
    return Money(n)


def to_int(m: Money) -> int:
    """Unwrap a Money value.

    Args:
        m: Money to unwrap.

    Returns:
        The stored integer.

    Raises:
        TypeError: If m is not a Money (e.g. a raw int).
    """
    if not isinstance(m, Money):
        raise TypeError(f"expected Money, got {type(m).__name__}")
    return m._value


def map(f: Callable[[int], int], m: Money) -> Money:
    """Apply f to the wrapped amount and rewrap the result.

    Exceptions raised by f propagate unchanged. A non-int result raises
    TypeError.
    """
    return from_int(f(to_int(m)))


def map2(f: Callable[[int, int], int], m1: Money, m2: Money) -> Money:
    """Apply a two-argument function to two amounts, in argument order."""
    return from_int(f(to_int(m1), to_int(m2)))


def map3(f: Callable[[int, int, int], int], m1: Money, m2: Money, m3: Money) -> Money:
    return from_int(f(to_int(m1), to_int(m2), to_int(m3)))


def map4(
    f: Callable[[int, int, int, int], int],
    m1: Money,
    m2: Money,
    m3: Money,
    m4: Money,
) -> Money:
    return from_int(f(to_int(m1), to_int(m2), to_int(m3), to_int(m4)))


def map5(
    f: Callable[[int, int, int, int, int], int],
    m1: Money,
    m2: Money,
    m3: Money,
    m4: Money,
    m5: Money,
) -> Money:
    return from_int(f(to_int(m1), to_int(m2), to_int(m3), to_int(m4), to_int(m5)))


def map6(
    f: Callable[[int, int, int, int, int, int], int],
    m1: Money,
    m2: Money,
    m3: Money,
    m4: Money,
    m5: Money,
    m6: Money,
) -> Money:
    return from_int(f(to_int(m1), to_int(m2), to_int(m3), to_int(m4), to_int(m5), to_int(m6)))


def add(a: Money, b: Money) -> Money:
    """Add two amounts."""
    return map2(operator.add, a, b)


def subtract(a: Money, b: Money) -> Money:
    """Subtract b from a."""
    return map2(operator.sub, a, b)
