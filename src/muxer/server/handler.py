"""ASGI handler — binds the router to the ASGI request/response cycle.

The only component that touches raw ASGI HTTP scopes. Builds a typed
Request, strips the mux base path, matches the route, invokes the
handler, and sends the Response back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from muxer._internal.asgi import Receive, Scope, Send
from muxer._internal.invoke import invoke
from muxer.errors import HTTPError, NotFound
from muxer.http.request import Request
from muxer.http.response import Response
from muxer.routing.route import RouteMatch
from muxer.routing.router import Router
from muxer.server.errors import handle_http_error, handle_internal_error
from muxer.server.negotiation import negotiate
from muxer.server.sender import send_response


def strip_base_path(path: str, base_path: str) -> str | None:
    """Return *path* relative to *base_path*, or ``None`` if outside it."""
    if not path.startswith(base_path):
        return None
    return path[len(base_path):]


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    base_path: str,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        route_path = strip_base_path(request.path, base_path)
        match = router.match(request.method, route_path) if route_path is not None else None
        if match is None:
            raise NotFound(f"No route matches {request.method} {request.path!r}")

        response = await _invoke_handler(match, request.with_match(route_path, match.params))

    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send, head=request.method == "HEAD")


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched route's handler with the request and negotiate the result."""
    result = await invoke(match.route.handler, request)
    return negotiate(result)
