"""CLI entry point for pennies."""

import typer

from pennies.commands.admin import init_command
from pennies.commands.calc import add_command, subtract_command, total_command, transfer_command

app = typer.Typer(
    name="pennies",
    help="Pennies - whole-number money that never mixes with plain integers",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Pennies - whole-number money that never mixes with plain integers.

    Amounts are in minor units. Pass negative amounts after `--`.
    """
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize pennies configuration."""
    init_command(force)


@app.command()
def add(a: int, b: int) -> None:
    """Add two amounts."""
    add_command(a, b)


@app.command()
def subtract(a: int, b: int) -> None:
    """Subtract B from A."""
    subtract_command(a, b)


@app.command()
def total(
    amounts: list[int] = typer.Argument(..., help="Amounts to sum"),
) -> None:
    """Sum any number of amounts."""
    total_command(amounts)


@app.command()
def transfer(
    amount: int = typer.Option(..., "--amount", help="Amount to move"),
    source: int = typer.Option(..., "--source", help="Balance to take the amount from"),
    target: int = typer.Option(0, "--target", help="Balance to add the amount to"),
) -> None:
    """Move an amount from one balance to another."""
    transfer_command(amount, source, target)


if __name__ == "__main__":
    app()
