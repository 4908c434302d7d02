"""Document and score result types."""
from typing import List, NamedTuple

from pydantic import BaseModel, Field, field_validator


class Document(BaseModel):
    """A named bundle of keyword phrases. Phrases are stored as given."""

    id: str = Field(min_length=1)
    phrases: List[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("document id must not be blank")
        return v


class ScoreResult(NamedTuple):
    """A document and its score for one query. Lower is better; math.inf is no match."""
    document: Document
    score: float
