"""Run orchestration: fetch -> segment -> filter -> checkpoint -> enrich -> write."""

import logging
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Tuple

from wikitopics.errors import FetchError
from wikitopics.services.api import ApiClient
from wikitopics.services.classifier import SectionClassifier
from wikitopics.services.enricher import enrich
from wikitopics.services.page_fetcher import fetch_pages, unique_pages
from wikitopics.services.segmenter import MAX_SECTION_CHARS, count_sections, filter_sections
from wikitopics.services.writer import write_sections

logger = logging.getLogger(__name__)


class RunSummary(NamedTuple):
    name: str
    pages: int
    sections: int
    requests: int
    failures: int
    sections_path: Path
    topics_path: Path


def output_paths(output_dir: str, name: str) -> Tuple[Path, Path]:
    """Return the checkpoint and final output paths of collection *name*."""
    base = Path(output_dir)
    return base / f"wikisections-{name}.json", base / f"sectionswithtopics-{name}.json"


async def run(
    name: str,
    pages: Iterable[str],
    api: ApiClient,
    output_dir: str = "output",
    max_section_chars: int = MAX_SECTION_CHARS,
    classifier: Optional[SectionClassifier] = None,
) -> Optional[RunSummary]:
    """Process collection *name* end to end.

    The filtered sections are written before enrichment starts so that a
    failing topic service does not lose the segmentation work.

    Returns:
        A :class:`RunSummary`, or *None* when the run was aborted because no
        page could be retrieved (nothing is written in that case).
    """
    page_list = unique_pages(pages)
    sections_path, topics_path = output_paths(output_dir, name)

    logger.info("Grabbing data from Wikipedia (%d pages)", len(page_list))
    try:
        segmented = await fetch_pages(page_list, api, classifier)
    except FetchError as exc:
        logger.error("Error from Wikipedia, aborting run '%s': %s", name, exc)
        return None

    filtered = filter_sections(segmented, max_section_chars)
    section_count = count_sections(filtered)
    logger.info("Number of sections: %d", section_count)
    logger.info("Writing to file: '%s'", sections_path)
    write_sections(filtered, sections_path)

    enrichment = await enrich(filtered, api)
    logger.info("Total requests to Rosette: %d", enrichment.requests)
    logger.info("Writing to file: '%s'", topics_path)
    write_sections(enrichment.pages, topics_path)

    return RunSummary(
        name=name,
        pages=len(filtered),
        sections=section_count,
        requests=enrichment.requests,
        failures=enrichment.failures,
        sections_path=sections_path,
        topics_path=topics_path,
    )
