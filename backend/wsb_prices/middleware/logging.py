import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


# Separate from uvicorn.access, whose formatter expects its own arg layout
request_logger = logging.getLogger("wsb_prices.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and exposes the handling time as a header."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.1f}"

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        request_logger.info(
            "%s %s -> %d in %.1fms",
            request.method,
            target,
            response.status_code,
            elapsed_ms,
        )
        return response
