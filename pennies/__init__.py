"""pennies - a nominal Money type over integer minor units."""

from pennies.domain import (
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
