"""
Spin & Solve - Phrase File Models

Pydantic models describing a phrase file on disk.
"""

from pydantic import BaseModel, Field, field_validator

from spin_solve.engine.base import Phrase


class PhraseRecord(BaseModel):
    """One phrase entry in a phrase file."""

    text: str = Field(min_length=1)
    category: str = ""
    hints: list[str] = Field(default_factory=list)

    @field_validator("text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("phrase text cannot be blank")
        return value

    def to_phrase(self) -> Phrase:
        return Phrase.from_parts(self.text, self.category, self.hints)


class PhraseBook(BaseModel):
    """A full phrase file: one list of records per difficulty tier."""

    easy: list[PhraseRecord] = Field(default_factory=list)
    hard: list[PhraseRecord] = Field(default_factory=list)
