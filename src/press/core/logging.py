"""structlog setup and request/user log context for Press."""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Libraries that log every query or HTTP call at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore")


def setup_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging to stdout.

    Debug mode renders colored console lines; otherwise each event is one
    JSON object, which is what the log shipper expects.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(
    request_id: str | None, method: str | None = None, path: str | None = None
) -> None:
    """Attach the correlation id, and the route when known, to later events.

    A missing request id is left unbound rather than logged as null.
    """
    if request_id:
        bind_contextvars(request_id=request_id)
    if method and path:
        bind_contextvars(method=method, path=path)


def bind_user_context(user_id: int) -> None:
    """Attach the logged-in user's numeric id. Emails stay out of the logs."""
    bind_contextvars(user_id=user_id)


def clear_request_context() -> None:
    clear_contextvars()
