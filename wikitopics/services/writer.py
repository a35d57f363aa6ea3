"""Best-effort JSON snapshots of run results."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from wikitopics.models.section import PageSections, dump_page_sections

logger = logging.getLogger(__name__)


def write_json(content: Any, path: Union[str, Path]) -> bool:
    """Write *content* to *path* as pretty-printed JSON.

    Missing parent directories are created.  Errors are logged, never
    raised; the return value tells whether the file was written.  The write
    is not atomic.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content, ensure_ascii=False, indent=2), encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.error("Error writing to file at %s: %s", path, exc)
        return False
    return True


def write_sections(result: PageSections, path: Union[str, Path]) -> bool:
    return write_json(dump_page_sections(result), path)
