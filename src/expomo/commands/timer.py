"""Pomodoro timer commands for ExPomo."""

from typing import Optional

import typer
from pydantic import ValidationError

from expomo.config import TimerConfig, get_config_manager
from expomo.models.pomodoro.events import CommandType
from expomo.models.pomodoro.session import TimerSession
from expomo.utils.exit_codes import ERROR_GENERAL
from expomo.utils.logger import get_logger
from expomo.utils.notifications import DesktopNotifier, NullNotifier
from expomo.utils.ui.console import get_console
from expomo.utils.ui.formatters import format_error
from expomo.utils.ui.timer_app import run_timer_app

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Pomodoro timer")


def build_timer_config(base: TimerConfig, **overrides: Optional[int]) -> TimerConfig:
    """Apply command line overrides on top of the configured timer settings."""
    values = base.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return TimerConfig(**values)


@app.command("start")
@command_wrapper
def start_timer(
    work: Optional[int] = typer.Option(None, "--work", "-w", help="Work interval length in minutes"),
    short_break: Optional[int] = typer.Option(None, "--short-break", help="Short break length in minutes"),
    long_break: Optional[int] = typer.Option(None, "--long-break", help="Long break length in minutes"),
    target: Optional[int] = typer.Option(
        None, "--target", "-t", min=1, help="Expected pomodoros (skips the target prompt)"
    ),
    seconds: bool = typer.Option(
        False, "--seconds", help="Treat durations as seconds instead of minutes (for demos)"
    ),
    notify: bool = typer.Option(True, "--notify/--no-notify", help="Send desktop notifications"),
    profile: str = typer.Option("default", "--profile", help="Configuration profile"),
) -> None:
    """Start the interactive pomodoro timer."""
    logger = get_logger()
    config = get_config_manager(profile).config

    try:
        timer_config = build_timer_config(
            config.timer,
            work_minutes=work,
            short_break_minutes=short_break,
            long_break_minutes=long_break,
        )
    except ValidationError as e:
        format_error(f"Invalid timer settings: {e.errors()[0]['msg']}")
        raise typer.Exit(ERROR_GENERAL) from e

    durations = timer_config.durations(unit_seconds=1 if seconds else 60)

    if notify and config.notifications.enabled:
        notifier = DesktopNotifier()
    else:
        notifier = NullNotifier()

    session = TimerSession(
        durations=durations,
        notifier=notifier,
        notification_title=config.notifications.title,
    )
    if target is not None:
        session.expected_work_intervals = target
        session.dispatch(CommandType.START)

    logger.info("starting timer with %s", durations)
    finished = run_timer_app(session, tick_seconds=timer_config.tick_seconds)

    if finished.error is not None:
        raise finished.error

    summary = f"{session.completed_work_intervals}"
    if session.is_target_set:
        summary += f"/{session.expected_work_intervals}"
    console.print(f"[bold]Completed pomodoros:[/bold] {summary}")
