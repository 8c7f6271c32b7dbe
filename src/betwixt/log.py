import logging
import sys

import structlog


def configure_logging(level: int = logging.INFO) -> None:
    """
    Sends all log output to stderr as JSON lines.

    stdout is reserved for results (filter output, or the MCP JSON-RPC stream),
    so nothing here may write to it.
    """
    logging.basicConfig(stream=sys.stderr, level=level, force=True)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
