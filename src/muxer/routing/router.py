"""Ordered route table with linear-scan matching and reverse path building.

Routes are registered during setup and frozen before serving. Matching
walks the table in registration order, so the first compatible route
always wins.
"""

import logging
from typing import Any

from muxer._internal.types import Handler
from muxer.errors import (
    DuplicateNameError,
    DuplicateRouteError,
    MissingParameterError,
    RouteNotFoundError,
)
from muxer.routing.params import PathParams
from muxer.routing.pattern import compile_pattern, format_value, join_path, normalize_pattern
from muxer.routing.route import Route, RouteMatch

logger = logging.getLogger("muxer.routing")


class Router:
    """Route table, matcher and path builder.

    Usage::

        router = Router()
        router.register("GET", "users/{id}", profile)
        router.name(router.register("POST", "{domain}/{action}/{id}", act), "whatever")

        match = router.match("GET", "users/42")
        match.params["id"]  # "42"

        router.build_path("/api/", "whatever", "shop", True, 23.45)
        # "/api/shop/true/23.45"
    """

    __slots__ = ("_frozen", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._frozen = False

    # -- Registration --

    def register(
        self,
        method: str,
        pattern: str,
        handler: Handler,
        *,
        name: str = "",
    ) -> Route:
        """Add a route, optionally named. Must be called before ``freeze()``.

        Raises ``DuplicateRouteError`` if *method* is already registered
        for the same normalized *pattern*, or ``DuplicateNameError`` if
        *name* is taken. Both checks run first, so a failed call leaves
        the table unchanged.
        """
        self._check_not_frozen()
        pattern = normalize_pattern(pattern)
        for route in self._routes:
            if route.method == method and route.pattern == pattern:
                raise DuplicateRouteError(method, pattern)
        if name:
            self._check_name_free(name)

        route = Route(
            method=method,
            pattern=pattern,
            compiled=compile_pattern(pattern),
            handler=handler,
            name=name,
        )
        self._routes.append(route)
        logger.debug("Registered route %s %r", method, pattern)
        return route

    def name(self, route: Route, name: str) -> Route:
        """Attach *name* to *route* so paths can be built from it.

        Renaming a route replaces its previous name. Raises
        ``DuplicateNameError`` if a different route already uses *name*,
        and ``ValueError`` for an empty *name* or a foreign *route*.
        """
        self._check_not_frozen()
        if not name:
            msg = "Route name must not be empty"
            raise ValueError(msg)
        if not any(r is route for r in self._routes):
            msg = f"{route!r} is not registered with this router"
            raise ValueError(msg)
        self._check_name_free(name, exclude=route)
        # Route is frozen; name is its only field assigned after creation
        object.__setattr__(route, "name", name)
        logger.debug("Named route %s %r as %r", route.method, route.pattern, name)
        return route

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    def lookup(self, name: str) -> Route:
        """Return the route registered under *name*.

        Raises ``RouteNotFoundError`` if there is none.
        """
        if name:
            for route in self._routes:
                if route.name == name:
                    return route
        raise RouteNotFoundError(name)

    def freeze(self) -> None:
        """Freeze the table. No more routes can be added or named."""
        if not self._frozen:
            logger.debug("Route table frozen with %d route(s)", len(self._routes))
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Matching --

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Match *method* and a base-relative *path* against the table.

        Returns the first compatible route with its captured parameters,
        or ``None`` when nothing matches. Never raises for a miss.
        """
        parts = path.split("/")
        count = len(parts)

        for route in self._routes:
            if route.method != method or route.segment_count != count:
                continue
            if all(
                seg.is_variable or seg.name == part
                for seg, part in zip(route.compiled, parts)
            ):
                params = PathParams(
                    (seg.name, part)
                    for seg, part in zip(route.compiled, parts)
                    if seg.is_variable
                )
                return RouteMatch(route=route, params=params)

        return None

    # -- Building --

    def build_path(self, base_path: str, name: str, *values: Any) -> str:
        """Build a concrete path from the route named *name*.

        Values fill variable segments positionally. Raises
        ``RouteNotFoundError`` for an unknown name and
        ``MissingParameterError`` when a variable segment has no value.
        A ``None`` value counts as missing rather than being rendered.
        """
        route = self.lookup(name)
        expected = len(route.compiled.variable_names)

        parts = [base_path]
        index = 0
        for seg in route.compiled:
            if not seg.is_variable:
                parts.append(seg.name)
                continue
            if index >= len(values) or values[index] is None:
                raise MissingParameterError(name, index, expected)
            parts.append(format_value(values[index]))
            index += 1

        return join_path(*parts)

    def _check_name_free(self, name: str, *, exclude: Route | None = None) -> None:
        for other in self._routes:
            if other is not exclude and other.name == name:
                raise DuplicateNameError(name)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify routes after the router is frozen. "
                "Register and name routes before serving requests."
            )
            raise RuntimeError(msg)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"<Router routes={len(self._routes)} frozen={self._frozen}>"
