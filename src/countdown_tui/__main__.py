"""Allow ``python -m countdown_tui``."""

from countdown_tui.main import app

if __name__ == "__main__":
    app()
