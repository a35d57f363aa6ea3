"""Client for the Rosette text-analytics ``/topics`` endpoint."""

from typing import List, Optional

import httpx
from pydantic import ValidationError

from wikitopics.errors import TopicServiceError
from wikitopics.models.topic import Topic, TopicsResponse
from wikitopics.services.api import TopicService

_ROSETTE_TIMEOUT = 30


class RosetteClient(TopicService):
    """Submits raw text to Rosette and returns the extracted concepts.

    The concepts are returned exactly as the service ranked them; filtering
    and sorting happen in the enricher.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        user_agent: str,
        timeout: float = _ROSETTE_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        if api_key:
            self.headers["X-RosetteAPI-Key"] = api_key
        self.timeout = timeout
        self.transport = transport

    async def fetch_topics(self, text: str) -> List[Topic]:
        """Return the concepts Rosette extracts from *text*.

        Raises:
            httpx.HTTPError: on network or HTTP errors.
            TopicServiceError: if the response is not a ``{"concepts": [...]}`` object.
        """
        url = self.base_url + "topics"
        async with httpx.AsyncClient(
            timeout=self.timeout, headers=self.headers, transport=self.transport
        ) as client:
            response = await client.post(url, json={"content": text})
            response.raise_for_status()

        try:
            payload = TopicsResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise TopicServiceError(f"Unexpected response from {url}: {exc}") from exc
        return payload.concepts
