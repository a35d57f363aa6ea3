"""Client for the Wikipedia REST API's Parsoid HTML endpoint."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from wikitopics.services.api import PageSource

logger = logging.getLogger(__name__)

# Parsoid markup of the longest articles stays well below this
MAX_PAGE_BYTES = 10 * 1024 * 1024
_WIKIPEDIA_TIMEOUT = 30


def page_url(base_url: str, page: str) -> str:
    """Return the HTML endpoint URL for the article titled *page*.

    Titles use underscores instead of spaces and are quoted as a single path
    segment, so ``AC/DC`` becomes ``AC%2FDC``.
    """
    title = quote(page.strip().replace(" ", "_"), safe="")
    return base_url.rstrip("/") + "/" + title


class WikipediaClient(PageSource):
    """Retrieves the Parsoid markup of an article, one request per call.

    Wikipedia answers renamed articles with a redirect to the current title,
    which is followed.
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        timeout: float = _WIKIPEDIA_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.headers = {"User-Agent": user_agent, "Accept": "text/html"}
        self.timeout = timeout
        self.transport = transport

    async def fetch_html(self, page: str) -> str:
        """Return the Parsoid HTML of *page*.

        Raises:
            httpx.HTTPError: on network errors or a non-2xx answer (404 for a
                missing article).
            RuntimeError: if the markup is larger than MAX_PAGE_BYTES.
        """
        url = page_url(self.base_url, page)
        logger.debug("Fetching %s from %s", page, url)

        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
        ) as client:
            async with client.stream("GET", url) as response:
                response.raise_for_status()
                body = bytearray()
                async for chunk in response.aiter_bytes():
                    body.extend(chunk)
                    if len(body) > MAX_PAGE_BYTES:
                        raise RuntimeError(f"Markup of '{page}' exceeds {MAX_PAGE_BYTES} bytes.")

        return body.decode(response.encoding or "utf-8", errors="replace")
