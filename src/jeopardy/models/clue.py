"""Clue model and its reveal state machine."""

from dataclasses import dataclass
from enum import Enum


class ShowingState(str, Enum):
    """What a clue cell is currently displaying."""

    NONE = "none"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    """A question/answer pair with its reveal state."""

    question: str
    answer: str
    showing: ShowingState = ShowingState.NONE

    def reveal(self) -> str | None:
        """Advance the reveal state by one step.

        none -> question -> answer. Once the answer is showing the clue is
        terminal and further calls change nothing.

        Returns:
            The text to display for the new state, or None if nothing changed
        """
        if self.showing == ShowingState.NONE:
            self.showing = ShowingState.QUESTION
            return self.question
        if self.showing == ShowingState.QUESTION:
            self.showing = ShowingState.ANSWER
            return self.answer
        return None
