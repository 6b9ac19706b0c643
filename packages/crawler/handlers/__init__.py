"""
Handlers for the dungeon crawler.

Input Handlers:
- ActionHandler: interface the game loop asks for decisions
- ConsoleActionHandler: terminal input with re-prompting
- ScriptedActionHandler: fixed decisions for headless runs
"""

from .input_handler import (
    ActionHandler,
    ConsoleActionHandler,
    ScriptedActionHandler,
    parse_action_choice,
    parse_continue_choice,
)

__all__ = [
    "ActionHandler",
    "ConsoleActionHandler",
    "ScriptedActionHandler",
    "parse_action_choice",
    "parse_continue_choice",
]
