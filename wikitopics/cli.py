"""Command-line entry point: run the pipeline for one collection.

Examples::

    wikitopics                          # configured default collection
    wikitopics --collection science
    wikitopics --collection physics --pages "Max Planck" "Marie Curie"
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from wikitopics.config import get_settings
from wikitopics.logging_config import configure_logging
from wikitopics.services.api import build_api_client
from wikitopics.services.pipeline import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikitopics",
        description="Fetch Wikipedia articles, split them into sections and attach Rosette topics.",
    )
    parser.add_argument(
        "--collection",
        "-c",
        help="Collection name (default: the configured default collection)",
    )
    parser.add_argument(
        "--pages",
        nargs="+",
        metavar="TITLE",
        help="Article titles to process instead of the collection's configured list",
    )
    parser.add_argument("--output-dir", help="Directory for the JSON output files")
    parser.add_argument(
        "--delay-ms",
        type=int,
        help="Pause before every topic request, in milliseconds",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.delay_ms is not None:
        if args.delay_ms < 0:
            parser.error("--delay-ms must not be negative")
        overrides["request_delay_ms"] = args.delay_ms
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(args.log_level or settings.log_level)

    name = args.collection or settings.default_collection
    pages = args.pages or settings.collections.get(name)
    if not pages:
        parser.error(f"unknown collection '{name}' and no --pages given")

    api = build_api_client(settings)
    summary = asyncio.run(
        run(
            name,
            pages,
            api,
            output_dir=settings.output_dir,
            max_section_chars=settings.max_section_chars,
        )
    )
    if summary is None:
        return 1

    logger.info(
        "Run '%s' finished: %d pages, %d sections, %d topic requests (%d failed)",
        summary.name,
        summary.pages,
        summary.sections,
        summary.requests,
        summary.failures,
    )
    return 0
