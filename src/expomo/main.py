"""Main entry point for ExPomo."""

from pathlib import Path
from typing import Optional

import typer

from expomo import __version__
from expomo.commands import config, timer
from expomo.utils.exit_codes import ERROR_GENERAL
from expomo.utils.logger import get_log_path, get_logger
from expomo.utils.ui.console import get_console
from expomo.utils.ui.formatters import format_error

app = typer.Typer(
    name="expomo",
    help="A terminal pomodoro timer that tracks work intervals against a target",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(timer.app, name="timer", help="Pomodoro timer")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main(
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write the debug log here instead of the user log directory",
        dir_okay=False,
    ),
) -> None:
    """ExPomo - expected pomodoros."""
    try:
        logger = get_logger(log_file)
    except OSError as e:
        format_error(f"Cannot open debug log {log_file or get_log_path()}: {e}")
        raise typer.Exit(ERROR_GENERAL) from e
    logger.debug("expomo %s", __version__)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]ExPomo[/bold] version [cyan]{__version__}[/cyan]")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
