"""Stopwatch state and time formatting helpers."""

from __future__ import annotations

from datetime import datetime

# Tick period for both the clock and the stopwatch, in seconds
TICK_INTERVAL = 1.0


def format_stopwatch(seconds: int) -> str:
    """Render elapsed seconds as MM:SS; minutes keep growing past 59."""
    if seconds < 0:
        raise ValueError(f"elapsed seconds must be non-negative, got {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def format_clock(moment: datetime | None = None) -> str:
    """Local time of day as shown on the clock panel."""
    return (moment or datetime.now()).strftime("%X")


def local_timestamp(moment: datetime | None = None) -> str:
    """Human-readable local date and time stamped on new tasks."""
    return (moment or datetime.now()).strftime("%x, %X")


class Stopwatch:
    """Elapsed whole seconds with Stopped/Running states.

    The owner drives it by calling tick() once per second; ticks
    while stopped are ignored.
    """

    def __init__(self) -> None:
        self.elapsed = 0
        self.running = False

    def start(self) -> bool:
        """Switch to Running. Returns True if the state changed."""
        if self.running:
            return False
        self.running = True
        return True

    def pause(self) -> bool:
        """Switch to Stopped, keeping elapsed. Returns True if the state changed."""
        if not self.running:
            return False
        self.running = False
        return True

    def reset(self) -> None:
        """Switch to Stopped and clear elapsed."""
        self.running = False
        self.elapsed = 0

    def tick(self) -> None:
        if self.running:
            self.elapsed += 1

    @property
    def display(self) -> str:
        return format_stopwatch(self.elapsed)

    def __repr__(self) -> str:
        state = "running" if self.running else "stopped"
        return f"Stopwatch({self.display}, {state})"
