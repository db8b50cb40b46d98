import logging
import time
from typing import Callable

from fastapi import Request

logger = logging.getLogger("chemquiz.requests")


async def request_logging_middleware(request: Request, call_next: Callable):
    """Log every request with its status and duration."""
    start_time = time.perf_counter()

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    logger.info("[%s] %s - %s - %.3fs", request.method, request.url.path, response.status_code, duration)

    return response
