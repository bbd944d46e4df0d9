"""Desktop notifications for finished intervals."""

import logging
import platform
import shutil
import subprocess
import sys
from collections.abc import Callable

logger = logging.getLogger(__name__)


def _applescript_quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def get_notification_cmd(title: str, message: str, system: str | None = None) -> list[str] | None:
    """
    Build the OS command that shows a desktop notification.

    Returns None when no notifier is available on this system.
    """
    system = system or platform.system()

    if system == "Darwin" and shutil.which("osascript"):
        script = (
            f"display notification {_applescript_quote(message)} "
            f"with title {_applescript_quote(title)} sound name \"Hero\""
        )
        return ["osascript", "-e", script]

    if system == "Linux" and shutil.which("notify-send"):
        return ["notify-send", "-a", title, title, message]

    return None


class DesktopNotifier:
    """Sends notifications through notify-send or osascript.

    The notifier process is launched and never waited on. When no notifier
    is installed, or it fails to launch, *fallback* is called with the same
    title and message. Without a fallback the terminal bell is rung on stdout,
    which only reaches the terminal while no full-screen app owns it.
    """

    def __init__(
        self,
        system: str | None = None,
        fallback: Callable[[str, str], None] | None = None,
    ):
        self.system = system or platform.system()
        self.fallback = fallback
        self._processes: list[subprocess.Popen] = []

    def notify(self, title: str, message: str) -> None:
        self._reap()

        cmd = get_notification_cmd(title, message, self.system)
        if cmd is None:
            logger.debug("no desktop notifier on %s, using fallback alert", self.system)
            self._alert(title, message)
            return

        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.SubprocessError):
            logger.warning("failed to launch %s", cmd[0], exc_info=True)
            self._alert(title, message)
            return

        self._processes.append(process)
        logger.debug("notification sent via %s: %s", cmd[0], message)

    def _reap(self) -> None:
        """Drop finished notifier processes, logging any that failed."""
        pending = []
        for process in self._processes:
            code = process.poll()
            if code is None:
                pending.append(process)
            elif code != 0:
                logger.warning("notifier %s exited with %d", process.args[0], code)
        self._processes = pending

    def _alert(self, title: str, message: str) -> None:
        if self.fallback is None:
            self._bell()
        else:
            self.fallback(title, message)

    @staticmethod
    def _bell() -> None:
        try:
            sys.stdout.write("\a")
            sys.stdout.flush()
        except (OSError, ValueError):
            logger.debug("could not ring terminal bell", exc_info=True)


class NullNotifier:
    """Notifier that only records what it was asked to send."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    def notify(self, title: str, message: str) -> None:
        logger.debug("notification suppressed: %s - %s", title, message)
        self.sent.append((title, message))
