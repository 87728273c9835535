"""Errors raised while building a board."""


class AcquisitionError(Exception):
    """Base class for failures while loading board data from the trivia API."""

    pass


class TriviaAPIError(AcquisitionError):
    """The trivia API could not be reached or returned an unusable response."""

    pass


class InsufficientCategoriesError(AcquisitionError):
    """Too few categories with enough clues to fill a board."""

    pass


class InsufficientCluesError(AcquisitionError):
    """A category had fewer clues than a board column needs."""

    def __init__(self, category_id: int, available: int, required: int):
        self.category_id = category_id
        self.available = available
        self.required = required
        super().__init__(
            f"Category {category_id} has {available} clues, {required} required"
        )


class InsufficientItemsError(ValueError):
    """Raised when sampling more distinct items than a collection holds."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(f"Cannot choose {required} distinct items from {available}")
