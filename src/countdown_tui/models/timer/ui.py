"""Full-screen countdown UI."""

import time
from collections.abc import Callable

from rich.align import Align
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from countdown_tui.models.config_models import TimerConfig
from countdown_tui.utils.logger import get_logger

from .keyboard import KeyboardHandler, WindowsKeyboardHandler, get_keyboard_handler
from .state import Mode, Timer, Transition
from .terminal import TerminalSession

INPUT_HINTS = "[ q ] to quit, [ ^ ] inc time, [ v ] dec time, [ enter ] to start time"
RUNNING_HINTS = "[ esc ] to change time"
MARGIN = 2


class TimerDisplay:
    """Renders the timer and drives the polling loop."""

    def __init__(
        self,
        console: Console | None = None,
        config: TimerConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.console = console or Console()
        self.config = config or TimerConfig()
        self.clock = clock

    def create_layout(self, timer: Timer) -> Layout:
        """Create the timer layout: hints, bordered time, blank footer.

        A two-cell margin surrounds everything: spacer rows above and below,
        horizontal padding on each region.
        """
        layout = Layout()
        layout.split_column(
            Layout(Text(""), name="top_margin", size=MARGIN),
            Layout(name="instructions", size=1),
            Layout(name="time"),
            Layout(name="footer", size=3),
            Layout(Text(""), name="bottom_margin", size=MARGIN),
        )

        layout["instructions"].update(
            Padding(self._create_instructions(timer.mode), (0, MARGIN))
        )
        layout["time"].update(Padding(self._create_time_panel(timer), (0, MARGIN)))
        layout["footer"].update(Text(""))

        return layout

    def _create_instructions(self, mode: Mode) -> Text:
        hints = INPUT_HINTS if mode is Mode.INPUT else RUNNING_HINTS
        return Text(hints, no_wrap=True, overflow="ellipsis")

    def time_style(self, timer: Timer) -> Style:
        """Style of the remaining-time text for the current state."""
        if timer.mode is Mode.INPUT:
            return Style()
        color = self.config.expired_color if timer.expired else self.config.running_color
        return Style(color=color, blink2=self.config.blink)

    def _create_time_panel(self, timer: Timer) -> Panel:
        time_text = Text(
            str(timer.remaining_seconds), style=self.time_style(timer), justify="center"
        )
        return Panel(Align.center(time_text, vertical="middle"))

    def render_error(self, message: str) -> Panel:
        """Build a red error-message panel for display inside a region."""
        return Panel(
            Text(message, style="red"),
            title="Error Message",
            title_align="left",
            border_style="red",
        )

    def run_timer(
        self,
        timer: Timer | None = None,
        keyboard: KeyboardHandler | WindowsKeyboardHandler | None = None,
    ) -> Timer:
        """
        Run the fullscreen timer until the user quits.

        The terminal is restored before this returns or raises. Returns the
        timer in its final state.
        """
        timer = timer or Timer()
        keyboard = keyboard or get_keyboard_handler()

        session = TerminalSession(
            keyboard,
            self.console,
            self.create_layout(timer),
            mouse_capture=self.config.mouse_capture,
        )
        with session as live:
            try:
                self._loop(live, timer, keyboard)
            except KeyboardInterrupt:
                get_logger().info("interrupted, quitting")
        return timer

    def _loop(
        self,
        live: Live,
        timer: Timer,
        keyboard: KeyboardHandler | WindowsKeyboardHandler,
    ) -> None:
        logger = get_logger()
        started_at = self.clock()

        while True:
            live.update(self.create_layout(timer), refresh=True)

            key = keyboard.read_key(self.config.poll_interval)
            if key is not None:
                transition = timer.handle_key(key)
                if transition is Transition.QUIT:
                    logger.info("quit requested")
                    return
                if transition is Transition.STARTED:
                    started_at = self.clock()
                    logger.info("timer started: %ss", timer.target_seconds)
                elif transition is Transition.CANCELLED:
                    logger.info("timer cancelled: target %ss", timer.target_seconds)

            if timer.mode is Mode.RUNNING:
                timer.advance(self.clock() - started_at)
