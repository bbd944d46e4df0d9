"""Pomodoro timer engine for ExPomo."""

from .countdown import CountdownTimer
from .events import Command, CommandEvent, CommandType, EventQueue, Tick, TimeoutEvent
from .exceptions import ExpomoError, InvalidTargetError
from .keyboard import command_for_key
from .scheduler import IntervalKind, PomodoroDurations, duration_for, next_interval
from .session import SessionState, TimerSession
from .ui import TimerView, render_view

__all__ = [
    "CountdownTimer",
    "Command",
    "CommandEvent",
    "CommandType",
    "EventQueue",
    "Tick",
    "TimeoutEvent",
    "ExpomoError",
    "InvalidTargetError",
    "command_for_key",
    "IntervalKind",
    "PomodoroDurations",
    "duration_for",
    "next_interval",
    "SessionState",
    "TimerSession",
    "TimerView",
    "render_view",
]
