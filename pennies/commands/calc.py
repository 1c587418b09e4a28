"""Calculation commands for adding, subtracting and moving money."""

import sys
import tomllib

from rich.console import Console
from rich.markup import escape

from pennies.config import get_unit
from pennies.domain.ledger import total, transfer
from pennies.domain.models import Money, add, from_int, subtract, to_int

console = Console()


def load_unit() -> str:
    """Load the unit label, exiting on a broken config file."""
    try:
        return get_unit()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def render_amount(amount: Money, unit: str) -> str:
    """Render an amount with color based on its sign.

    Args:
        amount: Amount to render.
        unit: Unit label appended to the number.

    Returns:
        Rich markup string.
    """
    value = to_int(amount)
    unit = escape(unit)
    if value < 0:
        return f"[red]{value} {unit}[/red]"
    return f"[green]{value} {unit}[/green]"


def add_command(a: int, b: int) -> None:
    """Add two amounts."""
    unit = load_unit()
    result = add(from_int(a), from_int(b))
    console.print(render_amount(result, unit))


def subtract_command(a: int, b: int) -> None:
    """Subtract one amount from another."""
    unit = load_unit()
    result = subtract(from_int(a), from_int(b))
    console.print(render_amount(result, unit))


def total_command(amounts: list[int]) -> None:
    """Sum any number of amounts."""
    unit = load_unit()
    result = total(from_int(amount) for amount in amounts)
    console.print(render_amount(result, unit))
    console.print(f"[dim]{len(amounts)} amount(s)[/dim]")


def transfer_command(amount: int, source: int, target: int) -> None:
    """Move an amount between two balances."""
    unit = load_unit()

    new_source, new_target, error = transfer(from_int(amount), from_int(source), from_int(target))
    if error:
        console.print(f"[red]Transfer failed: {error}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Moved {amount} {escape(unit)}")
    console.print(f"  Source: {render_amount(new_source, unit)}")
    console.print(f"  Target: {render_amount(new_target, unit)}")
