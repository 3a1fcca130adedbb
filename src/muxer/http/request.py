"""Immutable HTTP request handed to route handlers.

The request is the context a handler receives: method, path, headers,
query, and the ``path_params`` captured by the matched route.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncIterator
from dataclasses import dataclass, field, replace
from typing import Any

from muxer._internal.asgi import Receive, Scope
from muxer.http.headers import Headers
from muxer.http.query import QueryParams
from muxer.routing.params import PathParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata is frozen at creation. The body is read asynchronously via
    ``.body()``, ``.text()`` or ``.json()`` and cached after the first read.

    ``path`` is the full request path; ``route_path`` is the same path
    with the mux base path removed, i.e. what the router matched.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    path_params: PathParams
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None
    route_path: str = ""

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Path plus query string."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    def with_match(self, route_path: str, path_params: PathParams) -> Request:
        """Return a copy carrying the matched route's parameters.

        The body cache is shared so a body read before dispatch is not lost.
        """
        return replace(self, route_path=route_path, path_params=path_params)

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body (cached)."""
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncIterator[bytes]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            chunk = message.get("body", b"")
            if chunk:
                yield chunk
            if not message.get("more_body", False):
                break

    async def text(self) -> str:
        raw = await self.body()
        return raw.decode("utf-8")

    async def json(self) -> Any:
        raw = await self.body()
        return json_module.loads(raw)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            path_params=PathParams(),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            _receive=receive,
        )
