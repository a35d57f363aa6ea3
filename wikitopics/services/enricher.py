"""Sequential topic enrichment of segmented sections.

Requests go out strictly one at a time with a fixed pause before each of
them, whether the previous one succeeded or not.  A failed request leaves
its section without topics and the loop moves on.
"""

import logging
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from wikitopics.models.section import PageSections, Section
from wikitopics.models.topic import Topic
from wikitopics.services.api import ApiClient

logger = logging.getLogger(__name__)


class EnrichmentResult(NamedTuple):
    pages: PageSections
    requests: int
    """Number of topic requests issued, successful or not."""
    failures: int


def rank_topics(concepts: Iterable[Topic]) -> List[Topic]:
    """Keep knowledge-base concepts only, most salient first.

    The sort is stable, so concepts with equal salience keep the order the
    service returned them in.
    """
    kept = [c for c in concepts if c.in_knowledge_base]
    return sorted(kept, key=lambda c: c.salience, reverse=True)


def _iter_sections(result: PageSections) -> Iterator[Tuple[str, Section]]:
    for page, sections in result.items():
        for section in sections:
            yield page, section


async def enrich(result: PageSections, api: ApiClient) -> EnrichmentResult:
    """Attach ranked topics to every section of *result*.

    Pages and sections are visited in order.  Sections are copied, so the
    mapping passed in is left untouched.
    """
    enriched: PageSections = {page: [] for page in result}
    requests = 0
    failures = 0

    for page, section in _iter_sections(result):
        await api.sleep()
        requests += 1
        logger.info(
            "Fetching topics: %s -> %s (level %d)", page, section.title, section.level
        )
        try:
            concepts = await api.fetch_topics(section.content.text)
        except Exception as exc:
            failures += 1
            logger.warning(
                "Topic service error (%s -> %s, level %d): %s",
                page,
                section.title,
                section.level,
                exc,
            )
        else:
            topics = rank_topics(concepts)
            section = section.model_copy(update={"topics": topics})
            logger.info(
                "%s -> %s (level %d) -- Topics fetched: %d",
                page,
                section.title,
                section.level,
                len(topics),
            )

        enriched[page].append(section)

    return EnrichmentResult(pages=enriched, requests=requests, failures=failures)
