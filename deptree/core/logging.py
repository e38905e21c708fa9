"""Logging setup for the scan_manifest CLI: structlog rendered through stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


def setup_logging() -> None:
    """Route ``deptree.*`` structlog events to stderr.

    DEPTREE_LOG_LEVEL sets the level (default INFO). DEPTREE_LOG_FORMAT picks
    ``console`` (default) or ``json`` rendering.
    """
    log_level = os.environ.get("DEPTREE_LOG_LEVEL", "INFO").upper()
    as_json = os.environ.get("DEPTREE_LOG_FORMAT", "console").lower() == "json"

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    renderer = (
        structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "deptree": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "deptree",
                },
            },
            "root": {"handlers": ["stderr"], "level": "WARNING"},
            "loggers": {"deptree": {"level": log_level}},
        }
    )
