"""Output formatters for CLI messages and settings."""

import json
from typing import Any

import yaml
from rich.table import Table

from .console import get_console

console = get_console()


def flatten(data: dict, prefix: str = "") -> dict[str, Any]:
    """Flatten nested settings into dot-separated keys."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten(value, f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


def format_output(data: dict, output_format: str = "table") -> None:
    """Format and display a settings dictionary."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_settings_table(data)


def format_settings_table(data: dict) -> None:
    """Format settings as key/value rows."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in flatten(data).items():
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(key, formatted_value)

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")
