from typing import List, Optional

from pydantic import BaseModel, Field


class SectionsRequest(BaseModel):
    pages: List[str] = Field(
        min_length=1,
        max_length=20,
        description="Wikipedia article titles to fetch and segment (1–20).",
    )


class RunRequest(BaseModel):
    name: str = Field(
        pattern=r"^[A-Za-z0-9_-]+$",
        max_length=64,
        description="Collection name; also used in the output file names.",
    )
    pages: Optional[List[str]] = Field(default=None, min_length=1, max_length=200)
    """Article titles to process.

    When omitted, the titles configured for collection ``name`` are used.
    """
