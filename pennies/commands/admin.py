"""Admin commands for setting up pennies."""

import sys
from pathlib import Path

from rich.console import Console

from pennies.config import create_default_config, get_config_path

console = Console()


def run_init(config_path: Path) -> None:
    """Create a fresh config file."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize pennies configuration."""
    config_path = get_config_path()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and config_path.exists():
            console.print("[red]Initialization failed:[/red]", style="bold")
            console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'pennies init --force' to overwrite[/yellow]")
            sys.exit(1)

        run_init(config_path)

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
