"""Commands, events and the single sequential event queue."""

from collections import deque
from dataclasses import dataclass
from enum import Enum

from .scheduler import IntervalKind


class CommandType(str, Enum):
    """User commands understood by the session state machine."""

    SET_TARGET_INPUT = "set_target_input"
    DELETE_INPUT = "delete_input"
    SET_TARGET = "set_target"
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    RESET = "reset"
    BACK = "back"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """A user command. ``text`` is only used by SET_TARGET_INPUT."""

    type: CommandType
    text: str = ""


@dataclass(frozen=True)
class Tick:
    """One elapsed timer unit."""


@dataclass(frozen=True)
class CommandEvent:
    command: Command


@dataclass(frozen=True)
class TimeoutEvent:
    """The active countdown reached zero while loaded with *kind*."""

    kind: IntervalKind


Event = Tick | CommandEvent | TimeoutEvent


class EventQueue:
    """FIFO of pending events, processed one at a time on the caller's thread."""

    def __init__(self):
        self._events: deque[Event] = deque()

    def post(self, event: Event) -> None:
        """Append an event behind everything already pending."""
        self._events.append(event)

    def post_next(self, event: Event) -> None:
        """Queue a derived event ahead of pending ones.

        A timeout is handled right after the tick that raised it, before any
        input that arrived later.
        """
        self._events.appendleft(event)

    def pop(self) -> Event | None:
        if not self._events:
            return None
        return self._events.popleft()

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)
