"""Unit tests for the interval scheduler."""

from __future__ import annotations

import pytest

from expomo.models.pomodoro.scheduler import (
    DEFAULT_DURATIONS,
    IntervalKind,
    PomodoroDurations,
    duration_for,
    interval_label,
    is_long_break,
    next_interval,
)


# ---------------------------------------------------------------------------
# PomodoroDurations
# ---------------------------------------------------------------------------


class TestPomodoroDurations:
    def test_default_values(self):
        """Defaults match standard pomodoro timings, in seconds."""
        assert DEFAULT_DURATIONS.work == 25 * 60
        assert DEFAULT_DURATIONS.short_break == 5 * 60
        assert DEFAULT_DURATIONS.long_break == 15 * 60
        assert DEFAULT_DURATIONS.long_break_every == 4

    def test_from_minutes(self):
        durations = PomodoroDurations.from_minutes(work=50, short_break=10, long_break=30)

        assert durations.work == 3000
        assert durations.short_break == 600
        assert durations.long_break == 1800

    def test_from_minutes_with_second_units(self):
        durations = PomodoroDurations.from_minutes(work=2, short_break=1, long_break=3, unit_seconds=1)

        assert (durations.work, durations.short_break, durations.long_break) == (2, 1, 3)

    @pytest.mark.parametrize("field", ["work", "short_break", "long_break"])
    def test_rejects_non_positive_durations(self, field):
        with pytest.raises(ValueError):
            PomodoroDurations(**{field: 0})

    def test_rejects_zero_long_break_every(self):
        with pytest.raises(ValueError):
            PomodoroDurations(long_break_every=0)


# ---------------------------------------------------------------------------
# next_interval
# ---------------------------------------------------------------------------


class TestNextInterval:
    def test_fourth_work_interval_earns_long_break(self):
        assert next_interval(IntervalKind.WORK, 4) == (IntervalKind.BREAK, DEFAULT_DURATIONS.long_break)

    def test_first_work_interval_gets_short_break(self):
        assert next_interval(IntervalKind.WORK, 1) == (IntervalKind.BREAK, DEFAULT_DURATIONS.short_break)

    @pytest.mark.parametrize("completed", [0, 1, 3, 4, 8, 11])
    def test_break_is_always_followed_by_work(self, completed):
        assert next_interval(IntervalKind.BREAK, completed) == (IntervalKind.WORK, DEFAULT_DURATIONS.work)

    @pytest.mark.parametrize("completed", [4, 8, 12, 40])
    def test_every_fourth_completion_is_long(self, completed):
        _, duration = next_interval(IntervalKind.WORK, completed)
        assert duration == DEFAULT_DURATIONS.long_break

    @pytest.mark.parametrize("completed", [1, 2, 3, 5, 6, 7, 9])
    def test_other_completions_are_short(self, completed):
        _, duration = next_interval(IntervalKind.WORK, completed)
        assert duration == DEFAULT_DURATIONS.short_break

    def test_zero_completed_never_long(self):
        assert is_long_break(0) is False
        assert next_interval(IntervalKind.WORK, 0) == (IntervalKind.BREAK, DEFAULT_DURATIONS.short_break)

    def test_custom_long_break_every(self):
        durations = PomodoroDurations(work=10, short_break=2, long_break=6, long_break_every=2)

        assert next_interval(IntervalKind.WORK, 2, durations) == (IntervalKind.BREAK, 6)
        assert next_interval(IntervalKind.WORK, 3, durations) == (IntervalKind.BREAK, 2)


# ---------------------------------------------------------------------------
# duration_for / interval_label
# ---------------------------------------------------------------------------


class TestDurationFor:
    def test_work_ignores_count(self):
        assert duration_for(IntervalKind.WORK, 4) == DEFAULT_DURATIONS.work

    def test_break_follows_long_break_rule(self):
        assert duration_for(IntervalKind.BREAK, 4) == DEFAULT_DURATIONS.long_break
        assert duration_for(IntervalKind.BREAK, 5) == DEFAULT_DURATIONS.short_break


class TestIntervalLabel:
    @pytest.mark.parametrize(
        "kind, completed, expected",
        [
            (IntervalKind.WORK, 0, "Work"),
            (IntervalKind.WORK, 4, "Work"),
            (IntervalKind.BREAK, 1, "Short break"),
            (IntervalKind.BREAK, 4, "Long break"),
        ],
    )
    def test_labels(self, kind, completed, expected):
        assert interval_label(kind, completed) == expected
