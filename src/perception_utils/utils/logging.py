"""Structured logging configuration for perception_utils.

Library modules log through ``logging.getLogger(__name__)``; this module
attaches a structlog ``ProcessorFormatter`` to the ``perception_utils``
logger so those records render as console text or JSON lines.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

LOGGER_NAME = "perception_utils"


def _build_formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_json: bool = False,
) -> None:
    """Configure the ``perception_utils`` logger tree.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to a log file. ``None`` disables file logging.
        log_json: If True, render log lines as JSON instead of human-readable.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # stderr keeps CLI results on stdout parseable
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(file_path), encoding="utf-8"))

    formatter = _build_formatter(log_json)

    root = logging.getLogger(LOGGER_NAME)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(numeric_level)
    for h in handlers:
        h.setLevel(numeric_level)
        h.setFormatter(formatter)
        root.addHandler(h)
    root.propagate = False
