"""Segment, CompiledPattern, Route and RouteMatch dataclasses."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from muxer._internal.types import Handler
from muxer.routing.params import PathParams


@dataclass(frozen=True, slots=True)
class Segment:
    """One ``/``-delimited unit of a route pattern.

    Literal:  ``users``  (is_variable=False, name="users")
    Variable: ``{id}``   (is_variable=True, name="id")
    """

    name: str
    is_variable: bool = False


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A route pattern parsed into segments. Never mutated."""

    segments: tuple[Segment, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Names of the variable segments, in pattern order."""
        return tuple(seg.name for seg in self.segments if seg.is_variable)


@dataclass(frozen=True, slots=True, eq=False)
class Route:
    """A registered endpoint. Frozen after creation.

    Created by ``Router.register()``. ``name`` is the one field that can
    change later, and only ``Router.name()`` changes it.
    """

    method: str
    pattern: str
    compiled: CompiledPattern
    handler: Handler
    name: str = ""

    @property
    def segment_count(self) -> int:
        return len(self.compiled)

    def __repr__(self) -> str:
        label = f" as {self.name!r}" if self.name else ""
        return f"<Route {self.method} {self.pattern!r}{label}>"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: PathParams = field(default_factory=PathParams)

    @property
    def handler(self) -> Handler:
        return self.route.handler
