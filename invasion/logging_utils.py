"""Logging utilities for invasion runs.

Provides color-coded console output so the different kinds of invasion
events can be told apart at a glance.
"""

import os
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for event kinds
    BLUE = "\033[94m"      # Alien travel
    YELLOW = "\033[93m"    # Landing
    RED = "\033[91m"       # Destruction and errors
    GREEN = "\033[92m"     # Completion, prompts
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colors_enabled() -> bool:
    """Colors are off on Windows consoles and when Config.NO_COLOR is set."""
    return os.name != "nt" and not Config.NO_COLOR


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text, or plain text when colors are disabled
    """
    if not colors_enabled():
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def event_color(event: str) -> Color:
    """Pick the color for an invasion event from its wording."""
    if event.startswith("Aliens landed!"):
        return Color.YELLOW
    if event.startswith("Invasion "):
        return Color.GREEN
    if " has been destroyed by " in event:
        return Color.RED
    if " has traveled from " in event:
        return Color.BLUE
    return Color.CYAN


def log_event(event: str) -> None:
    """Log an invasion event in the color of its kind."""
    print(colored(event, event_color(event)))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(message, Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


# Markers for interactive mode (color-blind accessible)
MARKER_ON = "🟢ON"
MARKER_OFF = "🔴OFF"
