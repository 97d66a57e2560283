import logging
import sys

import colorama
import structlog


def setup_logging(
    log_level="WARNING", log_verbose=False, log_json=False, log_file=None
):
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"invalid log level: {log_level}")

    if log_file:
        handler = logging.FileHandler(log_file)
        colors = False
    else:
        handler = logging.StreamHandler(sys.stderr)
        colors = sys.stderr.isatty()

    if colors:
        colorama.just_fix_windows_console()

    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_verbose:
        processors.append(structlog.stdlib.add_logger_name)
        processors.append(structlog.processors.format_exc_info)

    processors.append(renderer)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
