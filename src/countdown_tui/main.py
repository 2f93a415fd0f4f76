"""Main entry point for countdown-tui."""

import traceback

import typer

from countdown_tui import __version__
from countdown_tui.models.timer import TimerDisplay
from countdown_tui.services.config_service import ConfigError, get_config_service
from countdown_tui.utils.exit_codes import (
    ERROR_INVALID_CONFIG,
    ERROR_TERMINAL,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)
from countdown_tui.utils.logger import get_logger
from countdown_tui.utils.ui.console import get_console
from countdown_tui.utils.ui.formatters import format_error

app = typer.Typer(
    name="countdown-tui",
    help="A full-screen terminal countdown timer",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"[bold]countdown-tui[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


def _exit(code: int) -> typer.Exit:
    get_logger().info(
        "exiting with %s: %s", get_exit_code_name(code), get_exit_code_description(code)
    )
    return typer.Exit(code=code)


@app.command()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Set a duration with the arrow keys, press Enter to start, Esc to reset."""
    logger = get_logger()

    try:
        config = get_config_service().config
    except ConfigError as e:
        logger.error("config failed: %s", e)
        format_error(str(e))
        raise _exit(ERROR_INVALID_CONFIG) from e

    logger.info("countdown-tui %s started", __version__)
    display = TimerDisplay(console=get_console(), config=config)
    try:
        timer = display.run_timer()
    except OSError as e:
        # The terminal has already been restored at this point.
        logger.error("terminal failure: %s\n%s", e, traceback.format_exc())
        format_error(str(e))
        raise _exit(ERROR_TERMINAL if config.fail_on_error else SUCCESS) from e

    logger.info(
        "countdown-tui exited: target=%ss remaining=%ss",
        timer.target_seconds,
        timer.remaining_seconds,
    )
