"""Category and board models."""

from dataclasses import dataclass, field

from jeopardy.models.clue import Clue


class BoardShapeError(ValueError):
    """Raised when a board does not have the expected dimensions."""

    pass


@dataclass
class Category:
    """A titled column of clues. Identity is its position on the board."""

    title: str
    clues: list[Clue] = field(default_factory=list)


@dataclass(frozen=True)
class Board:
    """The full grid for one game session.

    The category list is fixed at construction; a restart builds a new Board
    rather than editing this one. Only the clues' reveal state changes.
    """

    categories: tuple[Category, ...]

    @classmethod
    def create(
        cls,
        categories: list[Category],
        num_categories: int,
        clues_per_category: int,
    ) -> "Board":
        """Build a board, checking it is exactly num_categories x clues_per_category."""
        if len(categories) != num_categories:
            raise BoardShapeError(
                f"Board needs {num_categories} categories, got {len(categories)}"
            )
        for index, category in enumerate(categories):
            if len(category.clues) != clues_per_category:
                raise BoardShapeError(
                    f"Category {index} ({category.title!r}) needs {clues_per_category} clues, "
                    f"got {len(category.clues)}"
                )
        return cls(categories=tuple(categories))

    def get_clue(self, category_index: int, clue_index: int) -> Clue | None:
        """Look up a clue by position, or None if the position is off the board."""
        if not 0 <= category_index < len(self.categories):
            return None
        clues = self.categories[category_index].clues
        if not 0 <= clue_index < len(clues):
            return None
        return clues[clue_index]
