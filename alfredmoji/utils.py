# SPDX-License-Identifier: MIT
"""Small console helpers."""

#: ANSI escape sequences used to highlight parts of log messages.
colors = {
    "bold": "\x1b[1m",
    "reset": "\x1b[0m",
}


def bold(text: str) -> str:
    """Wrap text in bold escape sequences."""
    return f"{colors['bold']}{text}{colors['reset']}"
