"""Pydantic schemas for trivia API payloads and API responses."""

from jeopardy.schemas.common import ErrorResponse
from jeopardy.schemas.jservice import CategoryDetail, CategorySummary, ClueData

__all__ = [
    "CategoryDetail",
    "CategorySummary",
    "ClueData",
    "ErrorResponse",
]
