"""Muxer exception hierarchy.

Shared across Router, Mux, and the server pipeline so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class MuxerError(Exception):
    """Base for all muxer-specific errors."""


class ConfigurationError(MuxerError):
    """Raised when routes are registered inconsistently.

    Always raised at registration time, before any request is served.
    """


class DuplicateRouteError(ConfigurationError):
    """A route with the same method and pattern is already registered."""

    def __init__(self, method: str, pattern: str) -> None:
        self.method = method
        self.pattern = pattern
        super().__init__(f"Route '{method} {pattern}' already exists")


class DuplicateNameError(ConfigurationError):
    """Another route already carries this name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route with name '{name}' already exists")


class BuildError(MuxerError):
    """Raised when a path cannot be built from a named route."""


class RouteNotFoundError(BuildError, LookupError):
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route '{name}' doesn't exist")


class MissingParameterError(BuildError, IndexError):
    """Too few values were supplied for the route's variable segments."""

    def __init__(self, name: str, index: int, expected: int) -> None:
        self.name = name
        self.index = index
        self.expected = expected
        super().__init__(
            f"Route '{name}' needs {expected} parameter(s), "
            f"no usable value at position {index}"
        )


@dataclass(frozen=True, slots=True)
class HTTPError(MuxerError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatch pipeline or by handlers. The ASGI handler
    catches these and dispatches to the matching ``@mux.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request method and path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
