"""Runtime settings loaded from environment variables.

Every field can be overridden with a ``WIKITOPICS_``-prefixed environment
variable or an entry in a local ``.env`` file, e.g.::

    WIKITOPICS_ROSETTE_API_KEY=...
    WIKITOPICS_REQUEST_DELAY_MS=1500
    WIKITOPICS_COLLECTIONS='{"physics": ["Max Planck", "Erwin Schrödinger"]}'
"""

from functools import lru_cache
from typing import Dict, List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WIKITOPICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Upstream services
    # ------------------------------------------------------------------

    wikipedia_base_url: str = "https://en.wikipedia.org/api/rest_v1/page/html/"
    """Parsoid HTML endpoint; the page title is appended to this URL."""

    rosette_api_url: str = "https://api.rosette.com/rest/v1/"
    rosette_api_key: Optional[str] = None

    user_agent: str = "wikitopics/1.0 (section topic extraction)"
    http_timeout: float = 30.0

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    request_delay_ms: int = 1000
    """Fixed pause enforced before every topic-extraction request."""

    max_section_chars: int = 50_000
    """Sections whose plain text is this long or longer are dropped."""

    output_dir: str = "output"

    collections: Dict[str, List[str]] = {
        "science": ["Albert Einstein", "Niels Bohr"],
    }
    default_collection: str = "science"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
