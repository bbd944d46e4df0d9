"""Restartable, pausable single-interval countdown."""


class CountdownTimer:
    """Counts down one interval at one-second resolution.

    The timer never drives itself: the host delivers ticks by calling
    :meth:`tick` once per elapsed unit. Ticks delivered while the timer is
    stopped are dropped rather than queued.
    """

    def __init__(self, duration: int):
        if duration <= 0:
            raise ValueError("duration must be positive")
        self.duration = duration
        self.remaining = duration
        self.running = False
        self.timed_out = False

    def start(self) -> None:
        """Begin decrementing. No-op if running or already timed out."""
        if self.running or self.timed_out:
            return
        self.running = True

    def stop(self) -> None:
        """Halt decrementing, preserving the remaining duration."""
        self.running = False

    def toggle(self) -> None:
        if self.running:
            self.stop()
        else:
            self.start()

    def reset(self, duration: int) -> None:
        """Load a new duration and re-arm the timeout, leaving the timer stopped."""
        if duration <= 0:
            raise ValueError("duration must be positive")
        self.duration = duration
        self.remaining = duration
        self.running = False
        self.timed_out = False

    def tick(self) -> bool:
        """
        Advance the countdown by one unit.

        Returns True only on the tick that brings the remaining duration to
        zero. Every later tick returns False until :meth:`reset` is called.
        """
        if not self.running or self.timed_out:
            return False

        self.remaining -= 1
        if self.remaining > 0:
            return False

        self.remaining = 0
        self.running = False
        self.timed_out = True
        return True

    @property
    def elapsed(self) -> int:
        return self.duration - self.remaining

    def format(self) -> str:
        """Format the remaining duration as MM:SS."""
        mins, secs = divmod(self.remaining, 60)
        return f"{mins:02d}:{secs:02d}"

    def __repr__(self) -> str:
        state = "running" if self.running else "stopped"
        return f"CountdownTimer({self.format()}, {state})"
