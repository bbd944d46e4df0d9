"""Key press to command translation for timer controls."""

from typing import Optional

from .events import Command, CommandType
from .session import SessionState

QUIT_KEYS = ("q", "ctrl+c")

# Bindings active once a target has been entered.
CONTROL_KEYS = {
    "p": CommandType.PAUSE,
    "r": CommandType.RESUME,
    "x": CommandType.RESET,
    "b": CommandType.BACK,
}

KEY_HINTS = {
    SessionState.COLLECTING_TARGET: [
        ("enter", "set target and start"),
        ("q", "quit"),
    ],
    SessionState.RUNNING: [
        ("p", "pause"),
        ("x", "reset"),
        ("q", "quit"),
    ],
    SessionState.PAUSED: [
        ("r", "resume"),
        ("x", "reset"),
        ("b", "change target"),
        ("q", "quit"),
    ],
    SessionState.INTERVAL_STOPPED: [
        ("enter", "start next interval"),
        ("b", "change target"),
        ("q", "quit"),
    ],
}


def command_for_key(
    key: str, state: SessionState, character: Optional[str] = None
) -> Optional[Command]:
    """
    Map a key press to a command for the current state.

    While the target is being entered every printable character except the
    quit key is treated as input text. Returns None for unrecognised keys.
    """
    key = key.lower()

    if key in QUIT_KEYS:
        return Command(CommandType.QUIT)

    if state == SessionState.COLLECTING_TARGET:
        if key == "enter":
            return Command(CommandType.SET_TARGET)
        if key == "backspace":
            return Command(CommandType.DELETE_INPUT)
        if character and character.isprintable():
            return Command(CommandType.SET_TARGET_INPUT, text=character)
        return None

    if key == "enter":
        return Command(CommandType.START)

    command_type = CONTROL_KEYS.get(key)
    if command_type is None:
        return None
    return Command(command_type)


def hints_for(state: SessionState) -> list[tuple[str, str]]:
    """Get (key, action) hints for the commands that do something in *state*."""
    return KEY_HINTS[state]
