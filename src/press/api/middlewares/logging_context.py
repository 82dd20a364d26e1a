"""Per-request log context."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.press.core.logging import bind_request_context, clear_request_context


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Tag every event logged while serving the request with its id and route.

    Context from a previous request on the same task is dropped first.
    """
    clear_request_context()
    bind_request_context(correlation_id.get(), request.method, request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_request_context()
