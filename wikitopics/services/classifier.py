"""Decides which ``<section>`` blocks of a Parsoid document are article sections.

Parsoid wraps every heading and the content that follows it in a
``<section data-mw-section-id="N">`` element, with ``N == 0`` for the lead.
Other ``<section>`` elements (and sections whose heading is not the first
child) are noise for our purposes.  Detection relies on the first child's
tag name, which is a heuristic: documents that wrap headings in extra
markup will not be recognised.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple, Optional

from bs4 import Tag

from wikitopics.models.section import INTRO_TITLE

SECTION_ID_ATTR = "data-mw-section-id"
LEAD_SECTION_ID = "0"

# h2 -> level 1 ... h7 -> level 6
HEADING_TAGS = ("h2", "h3", "h4", "h5", "h6", "h7")


class SectionHeading(NamedTuple):
    title: str
    level: int


def first_child_element(block: Tag) -> Optional[Tag]:
    """Return the first child of *block* that is an element (text nodes skipped)."""
    return next((child for child in block.children if isinstance(child, Tag)), None)


class SectionClassifier(ABC):
    @abstractmethod
    def classify(self, block: Tag) -> Optional[SectionHeading]:
        """Return the title and level of *block*, or None if it is not a content section."""


class HeadingClassifier(SectionClassifier):
    """Accepts the lead block and blocks whose first child is an ``h2``..``h7``."""

    def classify(self, block: Tag) -> Optional[SectionHeading]:
        if block.get(SECTION_ID_ATTR) == LEAD_SECTION_ID:
            return SectionHeading(INTRO_TITLE, 0)

        first = first_child_element(block)
        if first is None or first.name not in HEADING_TAGS:
            return None

        return SectionHeading(first.get_text(), int(first.name[1:]) - 1)
