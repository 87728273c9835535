"""Board data acquisition: pick categories, then pick clues within each."""

import logging
import random

from jeopardy.config import settings
from jeopardy.exceptions import (
    InsufficientCategoriesError,
    InsufficientCluesError,
    InsufficientItemsError,
)
from jeopardy.models import Board, Category, Clue
from jeopardy.services.jservice import TriviaClient
from jeopardy.services.sampling import sample_distinct

logger = logging.getLogger(__name__)


async def select_category_ids(
    client: TriviaClient,
    *,
    count: int | None = None,
    pool_size: int | None = None,
    min_clues: int | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """Choose distinct category ids that can each fill a board column.

    Fetches a pool of candidate categories, keeps those with at least
    ``min_clues`` clues and samples ``count`` of them.

    Args:
        client: Trivia API client
        count: Number of ids to return (defaults to settings.num_categories)
        pool_size: Candidates to request (defaults to settings.category_pool_size)
        min_clues: Minimum clue count to qualify (defaults to settings.clues_per_category)
        rng: Random source, for reproducible selection

    Returns:
        ``count`` distinct category ids in random order

    Raises:
        TriviaAPIError: If the pool could not be fetched
        InsufficientCategoriesError: If fewer than ``count`` candidates qualify
    """
    count = count if count is not None else settings.num_categories
    pool_size = pool_size if pool_size is not None else settings.category_pool_size
    min_clues = min_clues if min_clues is not None else settings.clues_per_category

    candidates = await client.get_categories(pool_size)
    # dict.fromkeys keeps first-seen order while dropping repeated ids
    eligible = list(dict.fromkeys(c.id for c in candidates if c.clues_count >= min_clues))

    try:
        category_ids = sample_distinct(eligible, count, rng)
    except InsufficientItemsError as e:
        raise InsufficientCategoriesError(
            f"Only {e.available} of {len(candidates)} categories have at least "
            f"{min_clues} clues, {count} needed"
        ) from e

    logger.debug(f"Selected categories {category_ids} from {len(eligible)} eligible")
    return category_ids


async def load_category(
    client: TriviaClient,
    category_id: int,
    *,
    clues_per_category: int | None = None,
    rng: random.Random | None = None,
) -> Category:
    """Fetch a category and pick a random column's worth of its clues.

    Raises:
        TriviaAPIError: If the category could not be fetched
        InsufficientCluesError: If the category has too few clues
    """
    clues_per_category = (
        clues_per_category if clues_per_category is not None else settings.clues_per_category
    )

    detail = await client.get_category(category_id)

    try:
        picked = sample_distinct(detail.clues, clues_per_category, rng)
    except InsufficientItemsError as e:
        raise InsufficientCluesError(category_id, e.available, clues_per_category) from e

    return Category(
        title=detail.title,
        clues=[Clue(question=c.question, answer=c.answer) for c in picked],
    )


async def build_board(
    client: TriviaClient,
    *,
    num_categories: int | None = None,
    clues_per_category: int | None = None,
    pool_size: int | None = None,
    rng: random.Random | None = None,
) -> Board:
    """Run a full session setup and return a fresh board.

    Categories are loaded one after another, in the order their ids were
    chosen. Any failure aborts the build; no partial board is returned.
    """
    num_categories = num_categories if num_categories is not None else settings.num_categories
    clues_per_category = (
        clues_per_category if clues_per_category is not None else settings.clues_per_category
    )

    category_ids = await select_category_ids(
        client,
        count=num_categories,
        pool_size=pool_size,
        min_clues=clues_per_category,
        rng=rng,
    )

    categories: list[Category] = []
    for category_id in category_ids:
        categories.append(
            await load_category(client, category_id, clues_per_category=clues_per_category, rng=rng)
        )

    board = Board.create(categories, num_categories, clues_per_category)
    logger.info(
        f"Built board with {num_categories} categories: "
        + ", ".join(repr(c.title) for c in board.categories)
    )
    return board
