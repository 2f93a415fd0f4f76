"""Scoped terminal session: raw input, mouse capture and the alternate screen."""

from __future__ import annotations

from contextlib import ExitStack

from rich.console import Console, RenderableType
from rich.live import Live

from countdown_tui.utils.logger import get_logger

from .keyboard import KeyboardHandler, WindowsKeyboardHandler

ENABLE_MOUSE_CAPTURE = "\x1b[?1000h\x1b[?1006h"
DISABLE_MOUSE_CAPTURE = "\x1b[?1006l\x1b[?1000l"


class TerminalSession:
    """
    Take over the terminal for the lifetime of a ``with`` block.

    Entering switches stdin to raw input mode, enables mouse capture and
    starts an alternate-screen :class:`~rich.live.Live`. Leaving undoes each
    step in reverse order on every exit path, then lets any exception from
    the block propagate.
    """

    def __init__(
        self,
        keyboard: KeyboardHandler | WindowsKeyboardHandler,
        console: Console,
        initial: RenderableType,
        mouse_capture: bool = True,
    ):
        self.keyboard = keyboard
        self.console = console
        self.initial = initial
        self.mouse_capture = mouse_capture
        self._stack: ExitStack | None = None

    def _write(self, sequence: str) -> None:
        self.console.file.write(sequence)
        self.console.file.flush()

    def __enter__(self) -> Live:
        logger = get_logger()
        with ExitStack() as stack:
            self.keyboard.start()
            stack.callback(self.keyboard.stop)

            if (
                self.mouse_capture
                and self.keyboard.supports_mouse
                and self.console.is_terminal
            ):
                self._write(ENABLE_MOUSE_CAPTURE)
                stack.callback(self._write, DISABLE_MOUSE_CAPTURE)

            live = stack.enter_context(
                Live(
                    self.initial,
                    console=self.console,
                    auto_refresh=False,
                    screen=True,
                )
            )
            self._stack = stack.pop_all()

        logger.debug("terminal session started")
        return live

    def __exit__(self, *exc_info) -> bool:
        stack, self._stack = self._stack, None
        if stack is None:
            return False
        try:
            return stack.__exit__(*exc_info)
        finally:
            get_logger().debug("terminal session restored")
