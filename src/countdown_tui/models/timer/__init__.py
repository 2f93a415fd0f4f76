"""Countdown timer - state machine, keyboard input and fullscreen display."""

from .keyboard import (
    Key,
    KeyboardHandler,
    TerminalError,
    WindowsKeyboardHandler,
    decode_keys,
    get_keyboard_handler,
)
from .state import Mode, Timer, Transition
from .terminal import TerminalSession
from .ui import TimerDisplay

__all__ = [
    "Key",
    "KeyboardHandler",
    "WindowsKeyboardHandler",
    "TerminalError",
    "TerminalSession",
    "decode_keys",
    "get_keyboard_handler",
    "Mode",
    "Timer",
    "Transition",
    "TimerDisplay",
]
