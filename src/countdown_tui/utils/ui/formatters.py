"""Styled one-line messages printed outside the full-screen UI."""

from rich.markup import escape

from .console import get_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")
