"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        return replace(self, content_type=content_type)

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.body_bytes)


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect response.

    Pairs with ``Mux.build_path`` to redirect to a named route::

        return Redirect(mux.build_path("profile", user.id))
    """

    url: str
    status: int = 302
    headers: tuple[tuple[str, str], ...] = ()
