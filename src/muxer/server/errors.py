"""Error handling pipeline for muxer requests.

Maps HTTPError exceptions and unexpected failures to Response objects,
using registered error handlers or plain-text defaults.
"""

import inspect
import logging
import traceback
from collections.abc import Callable
from typing import Any

from muxer.errors import HTTPError
from muxer.http.request import Request
from muxer.http.response import Response
from muxer.server.negotiation import negotiate

logger = logging.getLogger("muxer.server")


async def call_error_handler(
    handler: Callable[..., Any],
    request: Request,
    exc: Exception,
) -> Response:
    """Invoke a user-registered error handler with introspected arguments.

    Error handlers may accept zero, one (request), or two (request, exc)
    args, and may be sync or async.
    """
    params = list(inspect.signature(handler).parameters.values())

    if len(params) >= 2:
        result = handler(request, exc)
    elif len(params) == 1:
        result = handler(request)
    else:
        result = handler()

    if inspect.isawaitable(result):
        result = await result

    return negotiate(result)


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Map an HTTPError to a Response using registered error handlers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    # Exact exception type first, then status code
    handler = error_handlers.get(type(exc)) or error_handlers.get(exc.status)
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        # Keep the error status unless the handler chose its own
        if response.status == 200:
            response = response.with_status(exc.status)
        return response

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response(body=detail, content_type="text/plain; charset=utf-8").with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    handler = error_handlers.get(500) or error_handlers.get(type(exc))
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        if response.status == 200:
            response = response.with_status(500)
        return response

    body = "Internal Server Error"
    if debug:
        body = "".join(traceback.format_exception(exc))
    return Response(body=body, status=500, content_type="text/plain; charset=utf-8")
