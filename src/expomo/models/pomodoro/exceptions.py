"""Exceptions raised by the pomodoro engine."""

from expomo.utils.exit_codes import ERROR_INVALID_INPUT


class ExpomoError(Exception):
    """Base exception carrying the process exit code it should map to."""

    exit_code = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidTargetError(ExpomoError):
    """The expected-interval target could not be parsed.

    Fatal: the session is aborted instead of re-prompting.
    """

    exit_code = ERROR_INVALID_INPUT

    def __init__(self, text: str):
        super().__init__(f"invalid target count: {text!r}")
        self.text = text
