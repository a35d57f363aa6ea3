import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from wikitopics.config import get_settings
from wikitopics.limiter import limiter
from wikitopics.logging_config import configure_logging
from wikitopics.routers.runs import router as runs_router
from wikitopics.routers.sections import router as sections_router

configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="wikitopics – Wikipedia section topics",
    description="Splits Wikipedia articles into sections and tags each section with Wikidata topics.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(sections_router)
app.include_router(runs_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from wikitopics"}
