"""Tests for wikitopics.services.page_fetcher.fetch_pages."""

import asyncio

import httpx
import pytest

from helpers import FakePages, FakeTopics, heading_section, lead, make_api, parsoid_doc
from wikitopics.errors import FetchError
from wikitopics.services.api import ApiClient
from wikitopics.services.page_fetcher import fetch_pages, unique_pages

_EINSTEIN = parsoid_doc(lead(), heading_section(1, "h2", "Life"))
_BOHR = parsoid_doc(lead(), heading_section(1, "h2", "Early years"), heading_section(2, "h3", "Education"))


class TestUniquePages:
    def test_removes_duplicates_keeping_first_order(self):
        assert unique_pages(["B", "A", "B", "C", "A"]) == ["B", "A", "C"]


class TestFetchPages:
    @pytest.mark.asyncio
    async def test_merges_pages_into_one_mapping(self):
        api = make_api({"Albert Einstein": _EINSTEIN, "Niels Bohr": _BOHR})
        result = await fetch_pages(["Albert Einstein", "Niels Bohr"], api)

        assert set(result) == {"Albert Einstein", "Niels Bohr"}
        assert [s.title for s in result["Niels Bohr"]] == ["__intro__", "Early years", "Education"]

    @pytest.mark.asyncio
    async def test_duplicates_are_fetched_once(self):
        api = make_api({"Albert Einstein": _EINSTEIN})
        await fetch_pages(["Albert Einstein", "Albert Einstein"], api)

        assert api.pages.requested == ["Albert Einstein"]

    @pytest.mark.asyncio
    async def test_requests_are_concurrent(self):
        started = []
        release = asyncio.Event()

        class SlowPages(FakePages):
            async def fetch_html(self, page):
                started.append(page)
                if len(started) == 2:
                    release.set()
                await release.wait()
                return await super().fetch_html(page)

        api = ApiClient(SlowPages({"A": _EINSTEIN, "B": _BOHR}), FakeTopics(lambda t: []), 0)
        result = await asyncio.wait_for(fetch_pages(["A", "B"], api), timeout=5)

        assert set(result) == {"A", "B"}

    @pytest.mark.asyncio
    async def test_single_page_failure_is_isolated(self):
        request = httpx.Request("GET", "https://en.wikipedia.org/api/rest_v1/page/html/Missing")
        not_found = httpx.HTTPStatusError(
            "404 Not Found", request=request, response=httpx.Response(404, request=request)
        )
        api = make_api({"Albert Einstein": _EINSTEIN, "Missing": not_found})
        result = await fetch_pages(["Albert Einstein", "Missing"], api)

        assert list(result) == ["Albert Einstein"]

    @pytest.mark.asyncio
    async def test_total_failure_raises(self):
        api = make_api({"A": RuntimeError("down"), "B": httpx.ConnectError("refused")})
        with pytest.raises(FetchError) as exc_info:
            await fetch_pages(["A", "B"], api)

        assert "A: down" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_page_list(self):
        assert await fetch_pages([], make_api({})) == {}

    @pytest.mark.asyncio
    async def test_page_with_no_sections_is_kept(self):
        api = make_api({"Stub": "<html><body><p>Nothing</p></body></html>"})
        assert await fetch_pages(["Stub"], api) == {"Stub": []}
