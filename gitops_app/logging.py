import logging
import sys

import structlog

HANDLER_NAME = "gitops_app"

# Applied to structlog events and to stdlib records (uvicorn) alike
SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _stdout_handler(renderer) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def init_logging(log_level: str = "INFO") -> structlog.BoundLogger:
    """Send structlog events and stdlib records through one stdout handler.

    Safe to call once per app: the handler installed by a previous call is
    replaced, other root handlers are left alone.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    renderer = structlog.dev.ConsoleRenderer() if level == logging.DEBUG else structlog.processors.JSONRenderer()

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(_stdout_handler(renderer))
    root.setLevel(level)

    structlog.configure(
        processors=SHARED_PROCESSORS
        + [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # create_app may reconfigure with another level
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger()
