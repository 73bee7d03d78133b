import logging
import os
import sys
from typing import Any, Literal

import structlog

LogFormat = Literal["json", "plain", "auto"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

_CI_VARIABLES = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL"]


def _should_use_json_format(format_type: LogFormat) -> bool:
    """Resolve "auto" to JSON in CI or when stderr is not a terminal."""
    if format_type != "auto":
        return format_type == "json"
    if any(os.environ.get(var) for var in _CI_VARIABLES):
        return True
    return not sys.stderr.isatty()


def setup_logging(format_type: LogFormat = "auto", level: LogLevel = "INFO") -> None:
    """
    Setup structured logging for conversion runs.

    Log lines go to stderr; stdout is reserved for converted text.

    Args:
        format_type: "json" for JSON output, "plain" for human-readable,
                "auto" to auto-detect based on TTY/CI.
        level: Lowest level that is written.
    """
    renderer: Any
    if _should_use_json_format(format_type):
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Streams change between CLI invocations in one process (tests)
        cache_logger_on_first_use=False,
    )


log = structlog.get_logger()
