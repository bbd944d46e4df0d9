"""Unit tests for the event queue."""

from __future__ import annotations

from expomo.models.pomodoro.events import (
    Command,
    CommandEvent,
    CommandType,
    EventQueue,
    Tick,
    TimeoutEvent,
)
from expomo.models.pomodoro.scheduler import IntervalKind


class TestEventQueue:
    def test_empty_queue(self):
        queue = EventQueue()

        assert len(queue) == 0
        assert not queue
        assert queue.pop() is None

    def test_fifo_order(self):
        queue = EventQueue()
        first = Tick()
        second = CommandEvent(Command(CommandType.PAUSE))
        queue.post(first)
        queue.post(second)

        assert queue.pop() is first
        assert queue.pop() is second

    def test_post_next_jumps_the_queue(self):
        queue = EventQueue()
        queue.post(CommandEvent(Command(CommandType.PAUSE)))
        timeout = TimeoutEvent(IntervalKind.WORK)

        queue.post_next(timeout)

        assert queue.pop() is timeout

    def test_clear(self):
        queue = EventQueue()
        queue.post(Tick())
        queue.clear()
        assert len(queue) == 0


class TestCommand:
    def test_text_defaults_to_empty(self):
        assert Command(CommandType.START).text == ""

    def test_commands_compare_by_value(self):
        assert Command(CommandType.SET_TARGET_INPUT, "3") == Command(CommandType.SET_TARGET_INPUT, "3")
