from typing import List

from pydantic import BaseModel, ConfigDict, Field

# Wikidata identifiers (Q42, Q937, ...) are the only concepts kept
KNOWLEDGE_BASE_PREFIX = "Q"


class Topic(BaseModel):
    """A concept returned by the topic-extraction service.

    Fields other than ``conceptId`` and ``salience`` (``phrase`` for
    instance) are kept as-is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    concept_id: str = Field(alias="conceptId")
    salience: float

    @property
    def in_knowledge_base(self) -> bool:
        return self.concept_id.startswith(KNOWLEDGE_BASE_PREFIX)


class TopicsResponse(BaseModel):
    """The part of a ``/topics`` response the enricher relies on."""

    concepts: List[Topic]
