"""Shared constants used across the application."""

# Board shape
NUM_CATEGORIES = 6
NUM_CLUES_PER_CATEGORY = 5

# How many categories to pull from the API before filtering and sampling
CATEGORY_POOL_SIZE = 100

# Text shown in a cell before its question is revealed
CELL_PLACEHOLDER = "?"

JSERVICE_API_URL = "https://jservice.io/api"
