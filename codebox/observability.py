"""
Logging setup for codebox.

Modules log through ``logging.getLogger(__name__)``; applications call
``setup_structlog_logging`` once at startup to get structured output.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import structlog

SCHEMA_VERSION = "1"


def _add_schema_version(logger, method, event_dict: Dict[str, Any]):
    event_dict.setdefault("schema_version", SCHEMA_VERSION)
    return event_dict


def _choose_renderer(fmt: Optional[str] = None):
    debug = str(os.getenv("DEBUG", "")).lower() in {"1", "true", "yes"}
    fmt = (fmt or os.getenv("LOG_FORMAT") or "").lower().strip()
    if debug or fmt == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_structlog_logging(min_level: str | int = "INFO", fmt: Optional[str] = None) -> None:
    level = logging.getLevelName(min_level) if isinstance(min_level, str) else int(min_level)

    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, handlers=[logging.StreamHandler()])
    else:
        logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_schema_version,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _choose_renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def emit_event(event: str, severity: str = "info", **fields: Any) -> None:
    logger = structlog.get_logger()
    log = getattr(logger, severity, logger.info)
    log(event, **fields)
