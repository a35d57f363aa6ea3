from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel

from wikitopics.models.section import Section


class SectionsResponse(BaseModel):
    pages: Dict[str, List[Section]]
    section_count: int


class RunAccepted(BaseModel):
    """Returned when a run has been scheduled; the files appear once it finishes."""

    name: str
    page_count: int
    sections_path: Path
    topics_path: Path
