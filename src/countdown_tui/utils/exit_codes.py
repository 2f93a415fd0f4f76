"""
Exit codes for countdown-tui.

A normal quit always exits with SUCCESS. Terminal failures only produce
ERROR_TERMINAL when ``fail_on_error`` is enabled in the config.
"""

# Success
SUCCESS = 0

# Config file could not be parsed or failed validation
ERROR_INVALID_CONFIG = 2

# Terminal setup, teardown, rendering or input failed
ERROR_TERMINAL = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_INVALID_CONFIG: "ERROR_INVALID_CONFIG",
        ERROR_TERMINAL: "ERROR_TERMINAL",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer exited normally",
        ERROR_INVALID_CONFIG: "Invalid configuration file - fix or delete it",
        ERROR_TERMINAL: "Terminal I/O failed - is stdin a TTY?",
    }
    return descriptions.get(code, "Unknown error")
