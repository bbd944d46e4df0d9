"""Text rendering of the timer screens."""

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from .keyboard import hints_for
from .scheduler import IntervalKind
from .session import SessionState, TimerSession

RULE = "=" * 54

MODE_LABELS = {
    SessionState.COLLECTING_TARGET: "ENTER TARGET",
    SessionState.RUNNING: "RUNNING",
    SessionState.PAUSED: "PAUSED",
    SessionState.INTERVAL_STOPPED: "STOPPED",
}

MODE_COLORS = {
    SessionState.COLLECTING_TARGET: "cyan",
    SessionState.RUNNING: "green",
    SessionState.PAUSED: "yellow",
    SessionState.INTERVAL_STOPPED: "magenta",
}


def mode_label(session: TimerSession) -> str:
    return MODE_LABELS[session.state]


def counts_line(session: TimerSession) -> str | None:
    """Completed/expected counts, or None while no target has been set."""
    if not session.is_target_set:
        return None
    return f"Pomodoros: {session.completed_work_intervals}/{session.expected_work_intervals}"


def hints_text(state: SessionState) -> str:
    return "Press " + "  •  ".join(f"<{key}> {action}" for key, action in hints_for(state))


def render_view(session: TimerSession) -> str:
    """Render the session as plain text. Does not touch the session.

    The timer app writes this to the debug log each time the screen changes
    mode; the live screen is drawn by :class:`TimerView`.
    """
    lines = ["", f"{mode_label(session):=^54}"]

    if session.state == SessionState.COLLECTING_TARGET:
        lines.append("Enter the number of expected pomodoros:")
        lines.append(f"> {session.target_input_buffer}")
        lines.append("")

    counts = counts_line(session)
    if counts:
        lines.append(f" - {counts}")

    if session.state != SessionState.COLLECTING_TARGET or session.has_armed_once:
        lines.append(f" - {session.interval_label}: {session.countdown.format()}")

    if session.target_reached:
        lines.append(" - Target reached!")

    lines.append(RULE)
    lines.append("")
    lines.append(hints_text(session.state))
    return "\n".join(lines)


class TimerView:
    """Builds rich renderables for the timer screen."""

    bar_width = 40

    def render(self, session: TimerSession) -> RenderableType:
        color = MODE_COLORS[session.state]
        components: list[RenderableType] = []

        if session.state == SessionState.COLLECTING_TARGET:
            components.append(
                Text("Enter the number of expected pomodoros", style="bold", justify="center")
            )
            prompt = Text(justify="center")
            prompt.append("> ", style="dim")
            prompt.append(session.target_input_buffer or " ", style="bold white")
            prompt.append("▏", style="blink")
            components.append(prompt)
            components.append(Text(""))

        counts = counts_line(session)
        if counts:
            components.append(Text(counts, justify="center"))

        if session.state != SessionState.COLLECTING_TARGET or session.has_armed_once:
            components.extend(self._timer_components(session))

        if session.target_reached:
            components.append(Text("🎉 Target reached!", style="bold green", justify="center"))

        components.append(Text(""))
        components.append(Text(hints_text(session.state), style="dim", justify="center"))

        return Panel(
            Align.center(Group(*components), vertical="middle"),
            title=Text(f"🍅  {mode_label(session)}", style=f"bold {color}"),
            border_style=color,
            padding=(1, 2),
        )

    def _timer_components(self, session: TimerSession) -> list[RenderableType]:
        countdown = session.countdown
        kind_style = "cyan" if session.current_interval_kind == IntervalKind.WORK else "green"

        if session.state == SessionState.PAUSED:
            timer_color = "yellow"
        elif session.state == SessionState.RUNNING and countdown.remaining < 60:
            timer_color = "red"
        else:
            timer_color = kind_style

        label = Text(session.interval_label, style=f"bold {kind_style}", justify="center")
        timer_text = Text(countdown.format(), style=f"bold {timer_color}", justify="center")

        progress_pct = min(100, int(countdown.elapsed * 100 / countdown.duration))
        filled = int(self.bar_width * progress_pct / 100)
        progress_bar = "▓" * filled + "░" * (self.bar_width - filled)
        progress = Text(f"{progress_bar}  {progress_pct}%", style="dim", justify="center")

        return [label, timer_text, progress]
