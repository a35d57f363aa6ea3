"""Parallel retrieval and segmentation of every page of a run."""

import asyncio
import logging
from typing import Iterable, List, Optional

from wikitopics.errors import FetchError
from wikitopics.models.section import PageSections
from wikitopics.services.api import ApiClient
from wikitopics.services.classifier import SectionClassifier
from wikitopics.services.segmenter import segment

logger = logging.getLogger(__name__)


def unique_pages(pages: Iterable[str]) -> List[str]:
    """Return *pages* without duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(pages))


async def _fetch_page(
    page: str, api: ApiClient, classifier: Optional[SectionClassifier]
) -> PageSections:
    html = await api.fetch_page(page)
    return {page: segment(page, html, classifier)}


async def fetch_pages(
    pages: Iterable[str],
    api: ApiClient,
    classifier: Optional[SectionClassifier] = None,
) -> PageSections:
    """Fetch and segment all *pages* concurrently.

    All requests are in flight at once and joined by a single gather.  A page
    that fails is logged and left out; the other pages are unaffected.

    Raises:
        FetchError: if pages were requested but none of them could be retrieved.
    """
    page_list = unique_pages(pages)
    outcomes = await asyncio.gather(
        *(_fetch_page(page, api, classifier) for page in page_list),
        return_exceptions=True,
    )

    result: PageSections = {}
    errors = []
    for page, outcome in zip(page_list, outcomes):
        if isinstance(outcome, Exception):
            logger.warning("Skipping page %s – %s", page, outcome)
            errors.append(f"{page}: {outcome}")
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        result.update(outcome)

    if page_list and not result:
        raise FetchError("No page could be retrieved (" + "; ".join(errors) + ")")

    return result
