import time
import uuid

import structlog
from fastapi import Request

from src.api.core.constants import SKIP_LOGGING_PATHS
from src.utils.logger import get_client_ip, get_logger
from src.utils.path_helpers import path_matches

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def logging_middleware(request: Request, call_next):
    """Bind per-request log context, echo the request id and log one access line."""
    if path_matches(request.url.path, SKIP_LOGGING_PATHS):
        return await call_next(request)

    started = time.perf_counter()
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id, ip_address=get_client_ip(request)
    )

    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id

    # The endpoint runs in its own task, so identity comes back via request.state
    identity = {
        key: value
        for key in ("user_id", "role")
        if (value := getattr(request.state, key, None)) is not None
    }

    elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
    log = logger.warning if response.status_code >= 500 else logger.info
    log(
        f"{request.method} {request.url.path} -> {response.status_code}",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=elapsed_ms,
        **identity,
    )
    return response
