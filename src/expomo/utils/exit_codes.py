"""
Exit codes for ExPomo.

Quitting from the timer is a success; everything else maps to a distinct
non-zero code so wrapper scripts can tell a bad target apart from a broken
environment.
"""

# Success (user quit)
SUCCESS = 0

# General error (log file, config or terminal could not be initialised)
ERROR_GENERAL = 1

# The expected pomodoro count could not be parsed
ERROR_INVALID_INPUT = 2


def get_exit_code_name(code: int) -> str:
    """Name of an exit code, as written to the debug log."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_INPUT: "ERROR_INVALID_INPUT",
    }
    return code_names.get(code, f"UNKNOWN({code})")

