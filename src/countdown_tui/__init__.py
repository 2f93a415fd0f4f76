"""countdown-tui - a full-screen terminal countdown timer."""

__version__ = "0.1.0"
