"""Payloads returned by the jService trivia API.

Only the fields the game uses are declared; everything else the API sends
(airdates, values, invalid counts) is ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategorySummary(BaseModel):
    """One entry from ``GET /categories``."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str | None = None
    clues_count: int = Field(default=0, ge=0)


class ClueData(BaseModel):
    """One clue inside a ``GET /category`` response."""

    model_config = ConfigDict(extra="ignore")

    question: str = ""
    answer: str = ""

    @field_validator("question", "answer", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # The API occasionally sends null or numeric answers
        if value is None:
            return ""
        return str(value)


class CategoryDetail(BaseModel):
    """Response from ``GET /category?id=<id>``."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    clues_count: int | None = None
    clues: list[ClueData] = Field(default_factory=list)
