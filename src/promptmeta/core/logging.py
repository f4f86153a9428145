#!/usr/bin/env python3
"""
Purpose:
    Configures structlog on top of stdlib logging for promptmeta, driven by
    the 'logging' section of the layered configuration.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

import structlog

_LOGGING_CONFIGURED = False


def configure_logging(config: Optional[Dict[str, Any]] = None, *, force: bool = False) -> None:
    """
    Configure structlog and stdlib logging once for the package.

    Args:
        config: merged configuration; only its 'logging' section is read
            ('level', 'json'). Defaults to INFO with a console renderer.
        force: reconfigure even if logging was already set up.
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED and not force:
        return

    section = (config or {}).get("logging", {})
    level_name = str(section.get("level", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=force,
    )

    renderer: Any = structlog.dev.ConsoleRenderer()
    if section.get("json", False):
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str = "promptmeta") -> Any:
    """Return a structlog logger, configuring logging lazily."""
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)
