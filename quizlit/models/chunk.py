"""Chunk data model."""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """A bounded slice of source text with its embedding.

    ``id`` has the form ``<document_id>:<sequence>``.
    """

    id: str
    text: str
    embedding: list[float] = Field(default_factory=list)

    @property
    def document_id(self) -> str:
        return self.id.rsplit(":", 1)[0]

    @property
    def sequence(self) -> int:
        return int(self.id.rsplit(":", 1)[1])
