# app/middleware/context.py
"""
Middleware for setting the logging context during the request lifecycle.

Every request gets an ID, taken from the ``X-Request-ID`` header when the
client sends one, which is bound into structlog's context variables so all
log lines of the request carry it.
"""

from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.monitoring import bind_request_id, clear_context

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware binding a request ID to the logging context.

    Uses try/finally to ensure the context is always cleared after request
    processing.

    Examples
    --------
    >>> app.add_middleware(RequestContextMiddleware)
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Bind the request ID and process the request.

        Parameters
        ----------
        request : Request
            The incoming HTTP request.
        call_next : RequestResponseEndpoint
            The next middleware/endpoint in the chain.

        Returns
        -------
        Response
            The HTTP response with the ``X-Request-ID`` header set.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        bind_request_id(request_id)

        try:
            response = await call_next(request)
        finally:
            # Always reset context to prevent leakage between requests
            clear_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
