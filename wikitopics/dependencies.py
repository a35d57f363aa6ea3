"""FastAPI dependencies.

Tests replace these through ``app.dependency_overrides`` to swap in fake
upstream services or a temporary output directory.
"""

from fastapi import Depends

from wikitopics.config import Settings, get_settings
from wikitopics.services.api import ApiClient, build_api_client


def get_api_client(settings: Settings = Depends(get_settings)) -> ApiClient:
    return build_api_client(settings)
