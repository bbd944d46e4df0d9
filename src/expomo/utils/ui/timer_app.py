"""Textual app hosting the pomodoro timer.

Textual's message loop is the single event loop: the interval timer posts
ticks, key presses post commands, and both drain the session's queue on the
same thread.
"""

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from expomo.models.pomodoro.events import CommandEvent, Tick
from expomo.models.pomodoro.exceptions import ExpomoError
from expomo.models.pomodoro.keyboard import command_for_key
from expomo.models.pomodoro.session import SessionState, TimerSession
from expomo.models.pomodoro.ui import TimerView, render_view
from expomo.utils.exit_codes import SUCCESS
from expomo.utils.notifications import DesktopNotifier

logger = logging.getLogger(__name__)


class PomodoroApp(App):
    """Full-screen pomodoro timer."""

    TITLE = "ExPomo"

    CSS = """
    Screen {
        align: center middle;
    }

    #timer {
        width: 72;
        height: auto;
    }
    """

    def __init__(
        self,
        session: TimerSession,
        tick_seconds: float = 1.0,
        view: TimerView | None = None,
    ):
        super().__init__()
        self.session = session
        self.tick_seconds = tick_seconds
        self.view = view or TimerView()
        self.error: ExpomoError | None = None
        self._logged_state: SessionState | None = None

    def compose(self) -> ComposeResult:
        yield Static(id="timer")

    def on_mount(self) -> None:
        """Draw the first screen and start ticking."""
        if isinstance(self.session.notifier, DesktopNotifier):
            self.session.notifier.fallback = self.alert
        self.refresh_view()
        self.set_interval(self.tick_seconds, self.handle_tick)

    def alert(self, title: str, message: str) -> None:
        """In-app alert for when no desktop notifier is available."""
        self.bell()
        self.notify(message, title=title, timeout=10)

    def handle_tick(self) -> None:
        self.session.post(Tick())
        self.process_session()

    def on_key(self, event: events.Key) -> None:
        """Translate key presses into session commands."""
        command = command_for_key(event.key, self.session.state, event.character)
        if command is None:
            return

        event.stop()
        event.prevent_default()
        self.session.post(CommandEvent(command))
        self.process_session()

    def process_session(self) -> None:
        try:
            self.session.process_events()
        except ExpomoError as e:
            logger.error("aborting session: %s", e)
            self.error = e
            self.exit(return_code=e.exit_code)
            return

        if self.session.quit_requested:
            logger.info("quit requested")
            self.exit(return_code=SUCCESS)
            return

        self.refresh_view()

    def refresh_view(self) -> None:
        if self.session.state != self._logged_state:
            self._logged_state = self.session.state
            logger.debug("screen changed:\n%s", render_view(self.session))
        self.query_one("#timer", Static).update(self.view.render(self.session))


def run_timer_app(session: TimerSession, tick_seconds: float = 1.0) -> PomodoroApp:
    """Run the timer until the user quits. Returns the finished app."""
    app = PomodoroApp(session, tick_seconds=tick_seconds)
    try:
        app.run()
    finally:
        if isinstance(session.notifier, DesktopNotifier):
            session.notifier.fallback = None
    return app
