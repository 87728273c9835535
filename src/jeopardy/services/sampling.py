"""Uniform random sampling without replacement."""

import random
from collections.abc import Sequence
from typing import TypeVar

from jeopardy.exceptions import InsufficientItemsError

T = TypeVar("T")


def sample_distinct(items: Sequence[T], count: int, rng: random.Random | None = None) -> list[T]:
    """Choose ``count`` items uniformly at random, without replacement.

    Every position in ``items`` is picked at most once. When ``items`` holds
    exactly ``count`` entries, all of them come back in random order.

    Raises:
        ValueError: If count is negative
        InsufficientItemsError: If items holds fewer than count entries
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if len(items) < count:
        raise InsufficientItemsError(available=len(items), required=count)
    return (rng or random).sample(list(items), count)
