"""Cross-platform keyboard input handler for timer controls."""

from __future__ import annotations

import codecs
import os
import sys
import time
from collections import deque
from enum import Enum


class Key(str, Enum):
    """Logical keys that are not a single printable character."""

    UP = "<up>"
    DOWN = "<down>"
    ENTER = "<enter>"
    ESC = "<esc>"
    MOUSE = "<mouse>"


class TerminalError(OSError):
    """The terminal could not be switched into or out of raw input mode."""


_ESC = "\x1b"

_CSI_KEYS = {"A": Key.UP, "B": Key.DOWN}

# X10 mouse report prefix; three raw coordinate bytes follow
_X10_MOUSE = b"\x1b[M"


def _csi_end(text: str, start: int) -> int:
    """Index just past the final byte of a CSI sequence starting at *start*."""
    i = start
    while i < len(text) and "\x20" <= text[i] <= "\x3f":
        i += 1
    return min(i + 1, len(text))


def decode_keys(text: str) -> list[str]:
    """
    Split raw terminal input into logical keys.

    Arrow keys, Enter and Esc become :class:`Key` members, mouse reports
    collapse to ``Key.MOUSE``, unknown escape sequences are returned verbatim
    and every other character is returned as-is.
    """
    keys: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in ("\r", "\n"):
            keys.append(Key.ENTER)
            i += 1
        elif ch != _ESC:
            keys.append(ch)
            i += 1
        elif text.startswith("\x1b[", i):
            end = _csi_end(text, i + 2)
            seq = text[i:end]
            if seq.startswith("\x1b[<"):
                keys.append(Key.MOUSE)
            else:
                keys.append(_CSI_KEYS.get(seq[2:], seq))
            i = end
        elif text.startswith("\x1bO", i) and i + 2 < len(text):
            seq = text[i : i + 3]
            keys.append(_CSI_KEYS.get(seq[2], seq))
            i += 3
        else:
            keys.append(Key.ESC)
            i += 1
    return keys


class KeyboardHandler:
    """Bounded-wait keyboard input handler for POSIX terminals."""

    supports_mouse = True

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._pending: deque[str] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def start(self):
        """Put the terminal into cbreak mode: no echo, no line buffering."""
        import termios
        import tty

        try:
            settings = termios.tcgetattr(self.fd)
        except termios.error as e:
            raise TerminalError(f"Cannot read terminal attributes: {e}") from e
        try:
            tty.setcbreak(self.fd)
        except termios.error as e:
            raise TerminalError(f"Cannot enter cbreak mode: {e}") from e
        self.old_settings = settings

    def read_key(self, timeout: float) -> str | None:
        """
        Wait at most *timeout* seconds for a key.

        Returns the decoded key, or None if nothing arrived in time. Bytes
        that decode to several keys are handed out one per call.
        """
        import select

        if self._pending:
            return self._pending.popleft()

        if not select.select([self.fd], [], [], timeout)[0]:
            return None
        data = os.read(self.fd, 1024)
        if not data:
            raise TerminalError("stdin closed")
        self._queue(data)
        return self._pending.popleft() if self._pending else None

    def _queue(self, data: bytes) -> None:
        # X10 coordinates are raw bytes, not UTF-8; cut them out before decoding
        while (start := data.find(_X10_MOUSE)) >= 0:
            self._pending.extend(decode_keys(self._decoder.decode(data[:start])))
            self._pending.append(Key.MOUSE)
            data = data[start + len(_X10_MOUSE) + 3 :]
        self._pending.extend(decode_keys(self._decoder.decode(data)))

    def stop(self):
        """Restore terminal settings."""
        import termios

        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error as e:
                raise TerminalError(f"Cannot restore terminal attributes: {e}") from e
            finally:
                self.old_settings = None


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    supports_mouse = False

    _EXTENDED = {"H": Key.UP, "P": Key.DOWN}

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def start(self):
        """Console input is already unbuffered under msvcrt."""
        if not self.msvcrt:
            raise TerminalError("msvcrt is not available on this platform")

    def read_key(self, timeout: float) -> str | None:
        """Poll kbhit() until a key arrives or *timeout* seconds pass."""
        if not self.msvcrt:
            return None

        deadline = time.monotonic() + timeout
        while not self.msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.01)

        key = self.msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            return self._EXTENDED.get(self.msvcrt.getwch())
        if key == "\r":
            return Key.ENTER
        if key == _ESC:
            return Key.ESC
        return key

    def stop(self):
        """No cleanup needed on Windows."""
        pass


def get_keyboard_handler() -> KeyboardHandler | WindowsKeyboardHandler:
    """Return the keyboard handler for the running platform."""
    if os.name == "nt":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
