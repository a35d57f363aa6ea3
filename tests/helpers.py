"""Fakes for the upstream services and Parsoid-like markup builders."""

from typing import Callable, Dict, List, Optional, Union

from wikitopics.models.topic import Topic
from wikitopics.services.api import ApiClient, PageSource, TopicService


class FakePages(PageSource):
    """Serves canned markup; an exception value is raised instead of returned."""

    def __init__(self, documents: Dict[str, Union[str, Exception]]):
        self.documents = documents
        self.requested: List[str] = []

    async def fetch_html(self, page: str) -> str:
        self.requested.append(page)
        document = self.documents[page]
        if isinstance(document, Exception):
            raise document
        return document


class FakeTopics(TopicService):
    """Answers with the concepts produced by *answer* for the submitted text."""

    def __init__(self, answer: Callable[[str], List[dict]]):
        self.answer = answer
        self.texts: List[str] = []

    async def fetch_topics(self, text: str) -> List[Topic]:
        self.texts.append(text)
        return [Topic.model_validate(c) for c in self.answer(text)]


def make_api(
    documents: Dict[str, Union[str, Exception]],
    answer: Optional[Callable[[str], List[dict]]] = None,
) -> ApiClient:
    answer = answer or (lambda text: [])
    return ApiClient(FakePages(documents), FakeTopics(answer), request_delay_ms=0)


def parsoid_doc(*sections: str) -> str:
    """Wrap section markup in a minimal Parsoid-like HTML document."""
    return "<!DOCTYPE html><html><head><title>Doc</title></head><body>" + "".join(sections) + "</body></html>"


def lead(body: str = "<p>Lead paragraph.</p>") -> str:
    return f'<section data-mw-section-id="0">{body}</section>'


def heading_section(section_id: int, tag: str, title: str, body: str = "<p>Body text.</p>") -> str:
    return f'<section data-mw-section-id="{section_id}"><{tag}>{title}</{tag}>{body}</section>'
