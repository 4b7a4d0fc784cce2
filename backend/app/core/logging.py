import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("app.requests")


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(getattr(handler, "_squadgpt", False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._squadgpt = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    # httpx logs every provider call at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def client_address(request: Request) -> str:
    if request.client is None:
        return "unknown"
    return request.client.host


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.0fms) ua=%s ip=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request.headers.get("user-agent", "-"),
            client_address(request),
        )
        return response
