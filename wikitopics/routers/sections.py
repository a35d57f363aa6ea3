import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from wikitopics.config import Settings, get_settings
from wikitopics.dependencies import get_api_client
from wikitopics.errors import FetchError
from wikitopics.limiter import limiter
from wikitopics.models.request import SectionsRequest
from wikitopics.models.response import SectionsResponse
from wikitopics.services.api import ApiClient
from wikitopics.services.page_fetcher import fetch_pages
from wikitopics.services.segmenter import count_sections, filter_sections

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/sections",
    response_model=SectionsResponse,
    response_model_exclude_unset=True,
    summary="Fetch and segment Wikipedia articles",
    description=(
        "Fetches every article in `pages` in parallel, splits it into "
        "sections and drops oversized ones.  No topics are requested; use "
        "`POST /runs` for a full run."
    ),
)
@limiter.limit("10/minute")
async def preview_sections(
    request: Request,
    body: SectionsRequest,
    api: ApiClient = Depends(get_api_client),
    settings: Settings = Depends(get_settings),
) -> SectionsResponse:
    logger.info("Sections request received: %s", ", ".join(body.pages))

    try:
        segmented = await fetch_pages(body.pages, api)
    except FetchError as exc:
        logger.error("Error fetching pages %s: %s", body.pages, exc)
        raise HTTPException(status_code=502, detail=str(exc))

    filtered = filter_sections(segmented, settings.max_section_chars)
    return SectionsResponse(pages=filtered, section_count=count_sections(filtered))
