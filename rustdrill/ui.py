"""Coloured status messages printed to the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_EMOJI = "⚠️ "
_WARN_PLAIN = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_PLAIN = "✓"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, message: str, colour: str) -> str:
    line = Text.assemble((symbol, colour), " ", (message, colour))
    Console(highlight=False, soft_wrap=True).print(line)
    return line.plain


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    symbol = _WARN_PLAIN if no_emoji() else _WARN_EMOJI
    return _emit(symbol, message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    symbol = _SUCCESS_PLAIN if no_emoji() else _SUCCESS_EMOJI
    return _emit(symbol, message, "green")


def bold(text: str) -> Text:
    """Return ``text`` styled in bold."""
    return Text(str(text), style="bold")