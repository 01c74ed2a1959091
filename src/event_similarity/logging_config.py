"""structlog + stdlib logging configuration.

Both ``structlog.get_logger()`` and plain ``logging.getLogger(__name__)``
calls (uvicorn, FastAPI) end up in the same handler and are rendered
either as JSON lines or with the coloured development console renderer.
"""

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    json_output: bool = True,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Configure unified logging for structlog and the stdlib root logger.

    Args:
        json_output: Render JSON lines when ``True``, coloured console
            output otherwise.
        log_level: Root log level name (``"DEBUG"``, ``"INFO"``, ...).
        stream: Destination stream.  Defaults to stdout; the CLI passes
            stderr so its JSON result stays clean on stdout.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper()))
