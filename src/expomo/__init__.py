"""ExPomo - a terminal pomodoro timer that tracks work intervals against a target."""

__version__ = "0.1.0"
