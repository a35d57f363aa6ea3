from typing import Dict, List, Optional

from pydantic import BaseModel

from wikitopics.models.topic import Topic

INTRO_TITLE = "__intro__"


class SectionContent(BaseModel):
    text: str
    html: str


class Section(BaseModel):
    """One titled, leveled block of an article.

    ``level`` is 0 for the lead block and ``heading rank - 1`` otherwise.
    ``topics`` stays ``None`` until the enricher attaches a ranked list, and
    is left out of the serialized output while unset.
    """

    page: str
    title: str
    level: int
    content: SectionContent
    topics: Optional[List[Topic]] = None


# Page identifier -> sections in document order
PageSections = Dict[str, List[Section]]


def dump_section(section: Section) -> dict:
    """Return *section* as JSON-ready data using the service field names.

    ``topics`` is left out while unset; everything else, including null
    fields the topic service returned, is kept.
    """
    exclude = {"topics"} if section.topics is None else None
    return section.model_dump(by_alias=True, exclude=exclude)


def dump_page_sections(result: PageSections) -> dict:
    return {page: [dump_section(s) for s in sections] for page, sections in result.items()}
