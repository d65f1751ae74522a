import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from typing import Callable, Awaitable

from expense_tracker.core.error_handler import global_exception_handler

REQUEST_ID_TOKEN_HEADER = "x-request-id"

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs one access line for it."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_TOKEN_HEADER) or str(uuid.uuid4())

        # Attach it to request.state for downstream usage
        request.state.request_id = request_id

        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            # Unhandled errors would otherwise reach the outer server-error
            # middleware and lose the request id header
            response = await global_exception_handler(request, exc)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_TOKEN_HEADER] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms) [{request_id}]"
        )
        return response
