import time

from fastapi import Request

from shortener.config import settings
from shortener.logging_config import setup_logging

logger = setup_logging()


async def request_logging_middleware(request: Request, call_next):
    """
    Log every request with its response status and duration.

    Short codes appear in the path, long URLs never do (they are only in
    request bodies and Location headers).
    """
    if not settings.REQUEST_LOGGING_ENABLED:
        return await call_next(request)

    start_time = time.perf_counter()
    client_ip = request.client.host if request.client else "unknown"

    response = await call_next(request)

    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} from {client_ip} - "
        f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
    )
    return response
