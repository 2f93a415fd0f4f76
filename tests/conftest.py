"""Shared test fixtures and configuration.

Keeps log and config files out of the real platform directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    import countdown_tui.utils.logger as logger_mod
    from countdown_tui.services.config_service import get_config_service

    logger_mod._logger = None
    get_config_service.cache_clear()
    with patch("countdown_tui.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        with patch(
            "countdown_tui.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ):
            yield tmp_path

    logger = logging.getLogger("countdown_tui")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger_mod._logger = None
    get_config_service.cache_clear()


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def tick(self, seconds: float) -> None:
        self.now += seconds


class ScriptedKeyboard:
    """Keyboard double replaying a script of keys and clock ticks.

    Each script entry is a key (str / Key), ``None`` for a poll timeout, a
    ``float`` number of seconds to advance *clock* by before the next poll,
    or an exception instance to raise from the poll.
    """

    supports_mouse = False

    def __init__(self, script, clock: FakeClock | None = None):
        self.script = list(script)
        self.clock = clock
        self.started = False
        self.stopped = False
        self.timeouts: list[float] = []

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def read_key(self, timeout: float):
        self.timeouts.append(timeout)
        while self.script and isinstance(self.script[0], float):
            self.clock.tick(self.script.pop(0))
        entry = self.script.pop(0)
        if isinstance(entry, BaseException):
            raise entry
        return entry


@pytest.fixture()
def fake_clock():
    return FakeClock()


@pytest.fixture()
def scripted_keyboard(fake_clock):
    """Factory building a ScriptedKeyboard bound to the shared fake clock."""

    def _make(*script):
        return ScriptedKeyboard(script, clock=fake_clock)

    return _make
