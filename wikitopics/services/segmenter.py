"""Splits an article's Parsoid markup into titled, leveled sections."""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from wikitopics.models.section import PageSections, Section, SectionContent
from wikitopics.services.classifier import SECTION_ID_ATTR, HeadingClassifier, SectionClassifier

logger = logging.getLogger(__name__)

# Structural boilerplate, never useful as topic input
SKIPPED_TITLES = frozenset({"References", "External links", "Further reading", "See also"})

MAX_SECTION_CHARS = 50_000


def segment(page: str, html: str, classifier: Optional[SectionClassifier] = None) -> List[Section]:
    """Return the content sections of *page* in document order.

    Every ``<section>`` carrying a section id is offered to *classifier*
    (a :class:`HeadingClassifier` by default).  Accepted blocks titled like
    boilerplate (references, external links, ...) are dropped.  The text and
    markup of a block include any subsections nested inside it.
    """
    classifier = classifier or HeadingClassifier()
    soup = BeautifulSoup(html, "lxml")

    sections: List[Section] = []
    for block in soup.find_all("section", attrs={SECTION_ID_ATTR: True}):
        heading = classifier.classify(block)
        if heading is None:
            continue
        if heading.title in SKIPPED_TITLES:
            continue

        markup = str(block)
        sections.append(
            Section(
                page=page,
                title=heading.title,
                level=heading.level,
                content=SectionContent(text=block.get_text(), html=markup),
            )
        )
        logger.info("%s -> %s (level %d) length: %d", page, heading.title, heading.level, len(markup))

    return sections


def filter_sections(result: PageSections, max_chars: int = MAX_SECTION_CHARS) -> PageSections:
    """Drop every section whose text is *max_chars* characters or longer."""
    return {
        page: [s for s in sections if len(s.content.text) < max_chars]
        for page, sections in result.items()
    }


def count_sections(result: PageSections) -> int:
    return sum(len(sections) for sections in result.values())
