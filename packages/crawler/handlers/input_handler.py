"""
Action Handlers - Collect the player's decisions.

The game loop asks an action handler two things:
- choose_action(labels): a 1-indexed pick from the action menu
- confirm_continue(): whether to move on after a room is cleared

ConsoleActionHandler reads lines from the terminal and re-prompts on bad
input for as long as it takes. ScriptedActionHandler replays fixed decisions
for headless runs and tests.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional
import logging


logger = logging.getLogger(__name__)


CONTINUE_WORDS = {"y", "yes", "c", "continue"}
QUIT_WORDS = {"n", "no", "q", "quit", "exit"}


def parse_action_choice(text: str, menu_size: int) -> Optional[int]:
    """
    Parse a 1-indexed menu choice.

    Returns None for non-numeric or out-of-range input; never defaults.
    """
    text = text.strip()
    try:
        choice = int(text)
    except ValueError:
        return None
    if 1 <= choice <= menu_size:
        return choice
    return None


def parse_continue_choice(text: str) -> Optional[bool]:
    """True to continue, False to quit, None if unrecognized."""
    word = text.strip().lower()
    if word in CONTINUE_WORDS:
        return True
    if word in QUIT_WORDS:
        return False
    return None


class ActionHandler:
    """Interface for anything that supplies player decisions."""

    def choose_action(self, labels: List[str]) -> int:
        raise NotImplementedError

    def confirm_continue(self) -> bool:
        raise NotImplementedError


class ConsoleActionHandler(ActionHandler):
    """Line-based terminal input with unbounded re-prompting."""

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def choose_action(self, labels: List[str]) -> int:
        """Show the menu and block until a valid choice is entered."""
        for i, label in enumerate(labels, start=1):
            self.output_fn(f"  {i}: {label}")

        while True:
            raw = self.input_fn(f"Choose an action (1-{len(labels)}): ")
            choice = parse_action_choice(raw, len(labels))
            if choice is not None:
                return choice
            logger.debug("Rejected action input %r", raw)
            self.output_fn(f"Invalid choice. Enter a number from 1 to {len(labels)}.")

    def confirm_continue(self) -> bool:
        """Ask whether to continue; EOF counts as quitting."""
        while True:
            try:
                raw = self.input_fn("Continue to the next room? (y/q): ")
            except EOFError:
                return False
            decision = parse_continue_choice(raw)
            if decision is not None:
                return decision
            self.output_fn("Please answer 'y' to continue or 'q' to quit.")


class ScriptedActionHandler(ActionHandler):
    """
    Replays predetermined decisions.

    Once the action script runs out, `default_action` is used; once the
    continue script runs out, the handler quits.
    """

    def __init__(
        self,
        actions: Iterable[int] = (),
        continues: Iterable[bool] = (),
        default_action: int = 1,
    ):
        self._actions = iter(actions)
        self._continues = iter(continues)
        self.default_action = default_action
        self.prompts: List[List[str]] = []

    def choose_action(self, labels: List[str]) -> int:
        self.prompts.append(list(labels))
        return next(self._actions, self.default_action)

    def confirm_continue(self) -> bool:
        return next(self._continues, False)
