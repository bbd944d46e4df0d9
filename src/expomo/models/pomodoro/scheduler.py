"""Work/break alternation rules."""

from dataclasses import dataclass
from enum import Enum


class IntervalKind(str, Enum):
    """Kind of the interval currently loaded in the countdown."""

    WORK = "work"
    BREAK = "break"


@dataclass(frozen=True)
class PomodoroDurations:
    """Interval durations, in timer units (seconds)."""

    work: int = 25 * 60
    short_break: int = 5 * 60
    long_break: int = 15 * 60
    long_break_every: int = 4

    def __post_init__(self):
        if min(self.work, self.short_break, self.long_break) <= 0:
            raise ValueError("all durations must be positive")
        if self.long_break_every < 1:
            raise ValueError("long_break_every must be at least 1")

    @classmethod
    def from_minutes(
        cls,
        work: int = 25,
        short_break: int = 5,
        long_break: int = 15,
        long_break_every: int = 4,
        unit_seconds: int = 60,
    ) -> "PomodoroDurations":
        """Build durations from minute values.

        ``unit_seconds=1`` treats each "minute" as one second, which keeps
        demo runs short.
        """
        return cls(
            work=work * unit_seconds,
            short_break=short_break * unit_seconds,
            long_break=long_break * unit_seconds,
            long_break_every=long_break_every,
        )


DEFAULT_DURATIONS = PomodoroDurations()


def is_long_break(completed_work_intervals: int, durations: PomodoroDurations = DEFAULT_DURATIONS) -> bool:
    """Check whether a break following *completed_work_intervals* is a long one."""
    # Nothing completed yet never earns a long break.
    if completed_work_intervals <= 0:
        return False
    return completed_work_intervals % durations.long_break_every == 0


def duration_for(
    kind: IntervalKind,
    completed_work_intervals: int,
    durations: PomodoroDurations = DEFAULT_DURATIONS,
) -> int:
    """Get the full duration of an interval of *kind* given the completion count."""
    if kind == IntervalKind.WORK:
        return durations.work
    if is_long_break(completed_work_intervals, durations):
        return durations.long_break
    return durations.short_break


def next_interval(
    prior_kind: IntervalKind,
    completed_work_intervals: int,
    durations: PomodoroDurations = DEFAULT_DURATIONS,
) -> tuple[IntervalKind, int]:
    """
    Decide which interval follows *prior_kind*.

    *completed_work_intervals* must already include the interval that just
    finished. Work is always followed by a break and a break by work.
    """
    if prior_kind == IntervalKind.WORK:
        new_kind = IntervalKind.BREAK
    else:
        new_kind = IntervalKind.WORK
    return new_kind, duration_for(new_kind, completed_work_intervals, durations)


def interval_label(kind: IntervalKind, completed_work_intervals: int, durations: PomodoroDurations = DEFAULT_DURATIONS) -> str:
    """Human-readable name of an interval: work, short break or long break."""
    if kind == IntervalKind.WORK:
        return "Work"
    if is_long_break(completed_work_intervals, durations):
        return "Long break"
    return "Short break"
