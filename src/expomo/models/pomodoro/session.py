"""Pomodoro session state machine."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from .countdown import CountdownTimer
from .events import Command, CommandEvent, CommandType, Event, EventQueue, Tick, TimeoutEvent
from .exceptions import InvalidTargetError
from .scheduler import (
    DEFAULT_DURATIONS,
    IntervalKind,
    PomodoroDurations,
    duration_for,
    interval_label,
    next_interval,
)

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """User-facing mode of the session."""

    COLLECTING_TARGET = "collecting_target"
    RUNNING = "running"
    PAUSED = "paused"
    INTERVAL_STOPPED = "interval_stopped"


class Notifier(Protocol):
    def notify(self, title: str, message: str) -> None: ...


class TimerSession:
    """Owns the countdown and applies commands and timer events to it.

    All mutation goes through :meth:`process_events`, which drains the event
    queue in arrival order on the calling thread.
    """

    def __init__(
        self,
        durations: PomodoroDurations = DEFAULT_DURATIONS,
        notifier: Notifier | None = None,
        notification_title: str = "ExPomo",
        expected_work_intervals: int = 0,
    ):
        self.durations = durations
        self.notifier = notifier
        self.notification_title = notification_title

        self.state = SessionState.COLLECTING_TARGET
        self.expected_work_intervals = expected_work_intervals
        self.completed_work_intervals = 0
        self.current_interval_kind = IntervalKind.WORK
        self.countdown = CountdownTimer(durations.work)
        self.target_input_buffer = ""
        self.has_armed_once = False
        self.quit_requested = False

        self.events = EventQueue()
        self._handlers: dict[CommandType, Callable[[Command], None]] = {
            CommandType.SET_TARGET_INPUT: self._append_input,
            CommandType.DELETE_INPUT: self._delete_input,
            CommandType.SET_TARGET: self._set_target,
            CommandType.START: self._start,
            CommandType.PAUSE: self._pause,
            CommandType.RESUME: self._resume,
            CommandType.RESET: self._reset,
            CommandType.BACK: self._back,
            CommandType.QUIT: self._quit,
        }

    # Queue entry points

    def post(self, event: Event) -> None:
        self.events.post(event)

    def process_events(self) -> None:
        """Handle every pending event, including timeouts raised along the way."""
        while self.events and not self.quit_requested:
            event = self.events.pop()
            if isinstance(event, Tick):
                self._handle_tick()
            elif isinstance(event, TimeoutEvent):
                self._handle_timeout(event)
            elif isinstance(event, CommandEvent):
                self._handle_command(event.command)

    def dispatch(self, command: Command | CommandType) -> None:
        """Queue a command and process it immediately."""
        if isinstance(command, CommandType):
            command = Command(command)
        self.post(CommandEvent(command))
        self.process_events()

    def tick(self) -> None:
        """Queue one elapsed timer unit and process it immediately."""
        self.post(Tick())
        self.process_events()

    # Queries

    @property
    def is_target_set(self) -> bool:
        return self.expected_work_intervals > 0

    @property
    def target_reached(self) -> bool:
        return self.is_target_set and self.completed_work_intervals >= self.expected_work_intervals

    @property
    def interval_label(self) -> str:
        return interval_label(self.current_interval_kind, self.completed_work_intervals, self.durations)

    # Event handlers

    def _handle_tick(self) -> None:
        if self.state != SessionState.RUNNING:
            return
        if self.countdown.tick():
            self.events.post_next(TimeoutEvent(self.current_interval_kind))

    def _handle_timeout(self, event: TimeoutEvent) -> None:
        finished = event.kind
        if finished == IntervalKind.WORK:
            self.completed_work_intervals += 1

        new_kind, duration = next_interval(finished, self.completed_work_intervals, self.durations)
        logger.info(
            "%s interval finished (%d/%d), loading %s for %ds",
            finished.value,
            self.completed_work_intervals,
            self.expected_work_intervals,
            new_kind.value,
            duration,
        )

        self.current_interval_kind = new_kind
        self.countdown = CountdownTimer(duration)
        self.state = SessionState.INTERVAL_STOPPED
        self._notify_finished(finished)

    def _handle_command(self, command: Command) -> None:
        logger.debug("command %s in state %s", command.type.value, self.state.value)
        self._handlers[command.type](command)

    def _ignore(self, command: Command) -> None:
        logger.debug("ignoring %s while %s", command.type.value, self.state.value)

    # Commands

    def _append_input(self, command: Command) -> None:
        if self.state != SessionState.COLLECTING_TARGET:
            return self._ignore(command)
        self.target_input_buffer += command.text

    def _delete_input(self, command: Command) -> None:
        if self.state != SessionState.COLLECTING_TARGET:
            return self._ignore(command)
        self.target_input_buffer = self.target_input_buffer[:-1]

    def _set_target(self, command: Command) -> None:
        if self.state != SessionState.COLLECTING_TARGET:
            return self._ignore(command)

        text = self.target_input_buffer
        try:
            target = int(text.strip())
        except ValueError as e:
            logger.error("error converting %r", text)
            raise InvalidTargetError(text) from e
        if target < 0:
            logger.error("negative target %r", text)
            raise InvalidTargetError(text)

        self.expected_work_intervals = target
        self.target_input_buffer = ""
        self._start(Command(CommandType.START))

    def _start(self, command: Command) -> None:
        if self.state == SessionState.COLLECTING_TARGET and self.target_input_buffer:
            return self._set_target(Command(CommandType.SET_TARGET))
        if self.state == SessionState.RUNNING:
            return self._ignore(command)

        if not self.has_armed_once:
            self.countdown = CountdownTimer(
                duration_for(self.current_interval_kind, self.completed_work_intervals, self.durations)
            )
            self.has_armed_once = True

        self.countdown.start()
        self.state = SessionState.RUNNING

    def _pause(self, command: Command) -> None:
        if self.state != SessionState.RUNNING:
            return self._ignore(command)
        self.countdown.stop()
        self.state = SessionState.PAUSED

    def _resume(self, command: Command) -> None:
        if self.state != SessionState.PAUSED:
            return self._ignore(command)
        self.countdown.start()
        self.state = SessionState.RUNNING

    def _reset(self, command: Command) -> None:
        if self.state not in (SessionState.RUNNING, SessionState.PAUSED):
            return self._ignore(command)
        self.countdown.reset(
            duration_for(self.current_interval_kind, self.completed_work_intervals, self.durations)
        )
        self.state = SessionState.PAUSED

    def _back(self, command: Command) -> None:
        if self.state not in (SessionState.INTERVAL_STOPPED, SessionState.PAUSED):
            return self._ignore(command)
        self.countdown.stop()
        self.target_input_buffer = ""
        self.state = SessionState.COLLECTING_TARGET

    def _quit(self, command: Command) -> None:
        self.quit_requested = True

    # Notifications

    def _notify_finished(self, finished: IntervalKind) -> None:
        if self.notifier is None:
            return

        if finished == IntervalKind.WORK:
            progress = str(self.completed_work_intervals)
            if self.is_target_set:
                progress += f"/{self.expected_work_intervals}"
            message = f"🍅 Pomodoro {progress} finished. Time for a {self.interval_label.lower()}."
        else:
            message = "☕ Break finished. Back to work."

        try:
            self.notifier.notify(self.notification_title, message)
        except Exception:
            logger.warning("notification failed", exc_info=True)
