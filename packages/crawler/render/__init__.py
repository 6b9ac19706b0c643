"""
Render module - Text output for the console front end.
"""

from .console import ConsoleRenderer, format_player

__all__ = [
    "ConsoleRenderer",
    "format_player",
]
