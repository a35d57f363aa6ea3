"""Upstream access shared by the fetch and enrichment phases."""

import asyncio
from abc import ABC, abstractmethod
from typing import List

from wikitopics.config import Settings
from wikitopics.models.topic import Topic


class PageSource(ABC):
    """Anything that can return the raw markup of an article."""

    @abstractmethod
    async def fetch_html(self, page: str) -> str:
        """Return the markup of *page*."""


class TopicService(ABC):
    """Anything that can extract concepts from a block of text."""

    @abstractmethod
    async def fetch_topics(self, text: str) -> List[Topic]:
        """Return the concepts found in *text*, in service order."""


class ApiClient:
    """Bundles the article source, the topic service and the request delay.

    Built once per run and handed to every phase that talks to an upstream
    service, so either side can be replaced independently.
    """

    def __init__(self, pages: PageSource, topics: TopicService, request_delay_ms: int = 1000):
        self.pages = pages
        self.topics = topics
        self.request_delay_ms = request_delay_ms

    async def sleep(self) -> None:
        """Wait out the fixed delay between two topic requests."""
        await asyncio.sleep(self.request_delay_ms / 1000)

    async def fetch_page(self, page: str) -> str:
        return await self.pages.fetch_html(page)

    async def fetch_topics(self, text: str) -> List[Topic]:
        return await self.topics.fetch_topics(text)


def build_api_client(settings: Settings) -> ApiClient:
    """Return an :class:`ApiClient` talking to Wikipedia and Rosette."""
    # Deferred: the concrete clients import this module
    from wikitopics.services.rosette import RosetteClient
    from wikitopics.services.wikipedia import WikipediaClient

    return ApiClient(
        pages=WikipediaClient(
            settings.wikipedia_base_url,
            user_agent=settings.user_agent,
            timeout=settings.http_timeout,
        ),
        topics=RosetteClient(
            settings.rosette_api_url,
            api_key=settings.rosette_api_key,
            user_agent=settings.user_agent,
            timeout=settings.http_timeout,
        ),
        request_delay_ms=settings.request_delay_ms,
    )
