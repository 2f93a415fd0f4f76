"""Timer state machine: input mode, running mode and the key dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .keyboard import Key


class Mode(Enum):
    """Interaction state of the timer."""

    INPUT = "input"
    RUNNING = "running"


class Transition(Enum):
    """What a key press did, so the run loop can react."""

    IGNORED = "ignored"
    UPDATED = "updated"
    STARTED = "started"
    CANCELLED = "cancelled"
    QUIT = "quit"


@dataclass
class Timer:
    """Countdown state. The start timestamp lives in the run loop."""

    target_seconds: int = 0
    elapsed_seconds: int = 0
    mode: Mode = Mode.INPUT

    @property
    def remaining_seconds(self) -> int:
        return self.target_seconds - self.elapsed_seconds

    @property
    def expired(self) -> bool:
        return self.remaining_seconds == 0

    def handle_key(self, key: str) -> Transition:
        """Apply a key press according to the current mode."""
        action = _TRANSITIONS.get((self.mode, key))
        if action is None:
            return Transition.IGNORED
        return action(self)

    def advance(self, seconds_since_start: float) -> None:
        """Recompute elapsed time from the clock delta, clamped to the target."""
        if self.mode is not Mode.RUNNING:
            return
        self.elapsed_seconds = min(max(int(seconds_since_start), 0), self.target_seconds)

    def _quit(self) -> Transition:
        return Transition.QUIT

    def _increase(self) -> Transition:
        self.target_seconds += 1
        return Transition.UPDATED

    def _decrease(self) -> Transition:
        if self.target_seconds == 0:
            return Transition.IGNORED
        self.target_seconds -= 1
        return Transition.UPDATED

    def _start(self) -> Transition:
        self.elapsed_seconds = 0
        self.mode = Mode.RUNNING
        return Transition.STARTED

    def _cancel(self) -> Transition:
        self.elapsed_seconds = 0
        self.mode = Mode.INPUT
        return Transition.CANCELLED


# Every (mode, key) pair not listed here is ignored.
_TRANSITIONS: dict[tuple[Mode, str], Callable[[Timer], Transition]] = {
    (Mode.INPUT, "q"): Timer._quit,
    (Mode.INPUT, Key.UP): Timer._increase,
    (Mode.INPUT, Key.DOWN): Timer._decrease,
    (Mode.INPUT, Key.ENTER): Timer._start,
    (Mode.RUNNING, Key.ESC): Timer._cancel,
}
