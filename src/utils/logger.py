import logging
import sys

import structlog
from fastapi import Request
from structlog.stdlib import ProcessorFormatter

# Event keys whose values never reach the log output
SENSITIVE_KEYS = frozenset(
    {"password", "password_hash", "token", "access_token", "private_key"}
)

CONTEXT_KEYS = ("request_id", "ip_address", "user_id", "role")

NOISY_LOGGERS = ("web3", "urllib3", "aiosqlite", "asyncio")


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        # First hop is the original client
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "127.0.0.1"


def merge_request_context(
    logger: structlog.BoundLogger, method_name: str, event_dict: dict
) -> dict:
    bound = structlog.contextvars.get_contextvars()
    for key in CONTEXT_KEYS:
        if bound.get(key):
            event_dict.setdefault(key, bound[key])
    return event_dict


def redact_sensitive(
    logger: structlog.BoundLogger, method_name: str, event_dict: dict
) -> dict:
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "[REDACTED]"
    return event_dict


def _build_formatter(is_production: bool) -> ProcessorFormatter:
    if is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    return ProcessorFormatter(processor=renderer)


def setup_logging(is_production: bool = False) -> structlog.BoundLogger:
    """Configure structlog on top of stdlib logging.

    Production emits one JSON object per line; development gets the
    coloured console renderer. Request context bound through
    ``structlog.contextvars`` is merged into every event.
    """
    level = logging.INFO if is_production else logging.DEBUG

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            merge_request_context,
            redact_sensitive,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(is_production))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    # uvicorn access logs are replaced by the request middleware
    for name in ("uvicorn", "uvicorn.access"):
        logging.getLogger(name).handlers = []
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return structlog.get_logger("welfarechain")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)
