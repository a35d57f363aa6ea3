import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request

from wikitopics.config import Settings, get_settings
from wikitopics.dependencies import get_api_client
from wikitopics.limiter import limiter
from wikitopics.models.request import RunRequest
from wikitopics.models.response import RunAccepted
from wikitopics.services.api import ApiClient
from wikitopics.services.page_fetcher import unique_pages
from wikitopics.services.pipeline import output_paths, run

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/runs",
    response_model=RunAccepted,
    status_code=202,
    summary="Start a full fetch-and-enrich run",
    description=(
        "Schedules a run for collection `name` in the background.  When "
        "`pages` is omitted the configured page list of the collection is "
        "used.  Topic requests are throttled, so a run takes at least one "
        "request delay per section."
    ),
)
@limiter.limit("2/minute")
async def start_run(
    request: Request,
    body: RunRequest,
    background_tasks: BackgroundTasks,
    api: ApiClient = Depends(get_api_client),
    settings: Settings = Depends(get_settings),
) -> RunAccepted:
    pages = body.pages or settings.collections.get(body.name)
    if not pages:
        raise HTTPException(status_code=404, detail=f"Unknown collection '{body.name}'.")

    pages = unique_pages(pages)
    sections_path, topics_path = output_paths(settings.output_dir, body.name)
    logger.info("Run scheduled: %s (%d pages)", body.name, len(pages))

    background_tasks.add_task(
        run,
        body.name,
        pages,
        api,
        output_dir=settings.output_dir,
        max_section_chars=settings.max_section_chars,
    )

    return RunAccepted(
        name=body.name,
        page_count=len(pages),
        sections_path=sections_path,
        topics_path=topics_path,
    )
