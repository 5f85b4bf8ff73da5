"""Log output for the ``meetcount`` logger tree.

Both stdlib ``logging.getLogger(__name__)`` records and structlog events
from meetcount modules go through one structlog formatter on stderr:
readable console lines by default, JSON lines with ``--log-json``.
Other libraries' loggers and the root logger are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

APP_LOGGER = "meetcount"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """(Re)configure logging; safe to call once per CLI invocation.

    Args:
        verbose: Show DEBUG records from meetcount; otherwise WARNING and up.
        log_json: Render JSON lines instead of console lines.
        stream: Destination, ``sys.stderr`` by default.
    """
    stream = stream or sys.stderr
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.handlers.clear()
    app_logger.addHandler(handler)
    app_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    app_logger.propagate = False
