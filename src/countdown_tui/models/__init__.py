"""countdown-tui models.

Pydantic configuration models plus the timer state machine, keyboard input
and full-screen display under :mod:`countdown_tui.models.timer`.
"""

from .config_models import TimerConfig

__all__ = ["TimerConfig"]
