"""Configuration management commands."""

from typing import Optional

import typer
from pydantic import ValidationError

from expomo.config import get_config_manager
from expomo.utils.ui.console import get_console
from expomo.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> str | int | float | bool:
    """Convert a command line string to the most specific scalar type."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


@app.command("view")
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str = typer.Option("table", "--output", "-o", help="Output format: table, json or yaml"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    format_output(config_manager.config.model_dump(), output)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_minutes)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager(profile)
    value = config_manager.get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_minutes)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager(profile)
    parsed_value = parse_value(value)
    try:
        config_manager.set(key, parsed_value)
    except KeyError as e:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1) from e
    except ValidationError as e:
        format_error(f"Invalid value for '{key}': {e.errors()[0]['msg']}")
        raise typer.Exit(1) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    config_manager = get_config_manager(profile)
    try:
        config_manager.reset(key)
    except KeyError as e:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
