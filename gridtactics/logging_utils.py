"""Logging utilities for gridtactics.

Provides color-coded console output so movement checks, errors and summaries
are easy to tell apart in a terminal.
"""

import os
from enum import Enum

from gridtactics.config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Deterministic checks (reachability, movement rules)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if GRIDTACTICS_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GRIDTACTICS_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def _enabled(level: str) -> bool:
    configured = _LEVELS.get(Config.LOG_LEVEL.upper(), _LEVELS["INFO"])
    return _LEVELS[level] >= configured


def log_deterministic(message: str) -> None:
    """Log a movement/reachability check (blue). Shown at DEBUG level."""
    if _enabled("DEBUG"):
        print(colored(f"{EMOJI_DETERMINISTIC} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    if _enabled("ERROR"):
        print(colored(f"{EMOJI_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    if _enabled("INFO"):
        print(colored(f"{EMOJI_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    if _enabled("INFO"):
        print(colored(f"{EMOJI_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
EMOJI_DETERMINISTIC = "[•]"  # Deterministic check
EMOJI_ERROR = "[!]"          # Error
EMOJI_SUCCESS = "[✓]"        # Success
EMOJI_INFO = "[i]"           # Information
