from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.core.constants import API_VERSION_HEADER
from src.api.core.exceptions.base import error_response
from src.api.core.messages import MessageCode
from src.utils.logger import get_client_ip, get_logger
from src.utils.settings.app import AppSettings

logger = get_logger(__name__)

# Left to CORSMiddleware
CORS_HEADERS = {
    "Access-Control-Allow-Origin",
    "Access-Control-Allow-Methods",
    "Access-Control-Allow-Headers",
    "Access-Control-Allow-Credentials",
    "Access-Control-Expose-Headers",
    "Access-Control-Max-Age",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    def __init__(self, app, is_production: bool = False):
        super().__init__(app)
        self.is_production = is_production
        self.app_settings = AppSettings()

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        headers = {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "strict-origin-when-cross-origin",
            "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
            "X-Permitted-Cross-Domain-Policies": "none",
            API_VERSION_HEADER: self.app_settings.API_VERSION,
        }

        if self.is_production:
            headers["Content-Security-Policy"] = (
                "default-src 'none'; frame-ancestors 'none'; base-uri 'none'"
            )
            if request.url.scheme == "https":
                headers["Strict-Transport-Security"] = (
                    "max-age=31536000; includeSubDomains"
                )

        for key, value in headers.items():
            if key not in response.headers and key not in CORS_HEADERS:
                response.headers[key] = value

        return response


class PayloadSizeMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body exceeds the configured limit."""

    def __init__(self, app, max_request_size: int | None = None):
        super().__init__(app)
        self.max_request_size = max_request_size or AppSettings().MAX_REQUEST_SIZE

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("Content-Length")
        if (
            content_length
            and content_length.isdigit()
            and int(content_length) > self.max_request_size
        ):
            logger.warning(
                f"Request too large: {content_length} bytes from {get_client_ip(request)}"
            )
            # Exceptions raised here would bypass the app's exception handlers
            return error_response(
                status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                MessageCode.REQUEST_TOO_LARGE,
                details={
                    "content_length": int(content_length),
                    "max_request_size": self.max_request_size,
                },
            )

        return await call_next(request)
