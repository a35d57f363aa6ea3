"""Exception hierarchy for the fetch / enrich pipeline."""


class WikitopicsError(Exception):
    """Base class for all pipeline errors."""


class FetchError(WikitopicsError):
    """Raised when no page of a run could be retrieved."""


class TopicServiceError(WikitopicsError):
    """Raised when the topic service answers with an unexpected payload."""
