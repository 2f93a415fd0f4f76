"""Service layer for countdown-tui."""
