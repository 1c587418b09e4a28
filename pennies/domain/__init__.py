"""Domain types and pure functions for pennies.

This package contains the functional core:
- The Money type and its operations
- Ledger helpers built on top of them
- No I/O operations
"""

from pennies.domain.models import (
    Money,
    add,
    from_int,
    map,
    map2,
    map3,
    map4,
    map5,
    map6,
    subtract,
    to_int,
    zero,
)

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
