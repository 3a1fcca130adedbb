"""Muxer — a simple URL-path muxer without regular expressions.

Maps an HTTP method and path to a handler, capturing ``{named}``
segments, and builds concrete paths back from route names.

Basic usage::

    from muxer import Mux, MuxConfig

    mux = Mux(MuxConfig(base_path="/api"))

    @mux.route("GET", "users/{id}", name="profile")
    def profile(request):
        return {"id": request.path_params["id"]}

    mux.build_path("profile", 123)  # "/api/users/123"
    mux.run()
"""

__version__ = "0.1.0"
__all__ = [
    "BuildError",
    "ConfigurationError",
    "DuplicateNameError",
    "DuplicateRouteError",
    "HTTPError",
    "MissingParameterError",
    "Mux",
    "MuxConfig",
    "MuxerError",
    "NotFound",
    "PathParams",
    "Redirect",
    "Request",
    "Response",
    "Route",
    "RouteMatch",
    "RouteNotFoundError",
    "Router",
]

_ERRORS = frozenset(
    {
        "BuildError",
        "ConfigurationError",
        "DuplicateNameError",
        "DuplicateRouteError",
        "HTTPError",
        "MissingParameterError",
        "MuxerError",
        "NotFound",
        "RouteNotFoundError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import muxer`` fast while providing a clean top-level API.
    """
    if name == "Mux":
        from muxer.mux import Mux

        return Mux

    if name == "MuxConfig":
        from muxer.config import MuxConfig

        return MuxConfig

    if name == "Router":
        from muxer.routing.router import Router

        return Router

    if name in ("Route", "RouteMatch"):
        from muxer.routing import route as _route

        return getattr(_route, name)

    if name == "PathParams":
        from muxer.routing.params import PathParams

        return PathParams

    if name == "Request":
        from muxer.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from muxer.http import response as _resp

        return getattr(_resp, name)

    if name in _ERRORS:
        from muxer import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
