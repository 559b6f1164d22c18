from __future__ import annotations

from pathlib import Path
from typing import TextIO

from platform_core.config import MusicInsightsSettings, load_music_insights_settings
from platform_core.errors import AppError, ErrorCode
from platform_core.logging import STRUCTURED_FIELDS, get_logger, setup_logging

from music_insights.catalog.decoders import load_catalog_file
from music_insights.queries import QueryCatalog, build_query_catalog

SERVICE_NAME = "music-insights"


def init_logging(settings: MusicInsightsSettings, *, stream: TextIO | None = None) -> None:
    setup_logging(
        level=settings["logging"]["level"],
        format_mode=settings["logging"]["format"],
        service_name=SERVICE_NAME,
        instance_id=None,
        extra_fields=list(STRUCTURED_FIELDS),
        stream=stream,
    )


def bootstrap(settings: MusicInsightsSettings | None = None) -> QueryCatalog:
    """Configure logging and build a QueryCatalog over the configured catalog file.

    Raises AppError(CONFIG_ERROR) when INSIGHTS__CATALOG_PATH is not set.
    """
    cfg = settings if settings is not None else load_music_insights_settings()
    init_logging(cfg)
    catalog_path = cfg["catalog_path"]
    if catalog_path is None:
        raise AppError(
            code=ErrorCode.CONFIG_ERROR,
            message="INSIGHTS__CATALOG_PATH is required",
        )
    catalog = load_catalog_file(Path(catalog_path))
    get_logger(__name__).info("music insights ready (timezone=%s)", cfg["timezone"])
    return build_query_catalog(catalog, settings=cfg)


__all__ = ["SERVICE_NAME", "bootstrap", "init_logging"]
