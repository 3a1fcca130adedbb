"""The Mux — an ASGI application dispatching requests through a Router.

Mutable during setup (route registration, naming, error handlers, hooks).
Frozen when the first request or lifespan event arrives.
"""

import inspect
import threading
from collections.abc import Callable
from typing import Any

from muxer._internal.asgi import Receive, Scope, Send
from muxer._internal.types import ErrorHandler, Handler
from muxer.config import MuxConfig
from muxer.routing.pattern import normalize_base_path
from muxer.routing.route import Route, RouteMatch
from muxer.routing.router import Router
from muxer.server.handler import handle_request, strip_base_path


class Mux:
    """A path muxer mounted under a base path.

    Each Mux owns its own Router; there is no process-wide registry.
    Create one during application setup and pass it where routing is
    needed::

        mux = Mux(MuxConfig(base_path="/api"))
        mux.add("GET", "users/{id}", profile, name="profile")
        mux.add("GET", "products", products)
        mux.add("PUT", "products/{id}/do", product_action)
        mux.add("POST", "{domain}/{action}/{id}", whatever, name="whatever")

        mux.build_path("profile", 123)  # "/api/users/123"

    Handlers take a single argument, the ``Request``; captured segments
    are in ``request.path_params``.

    Thread safety:
        Registration is single-threaded setup work. The freeze transition
        uses a Lock + double-check so exactly one caller freezes the
        router even if several workers deliver the first request at once.
        After freezing, matching and path building only read.
    """

    __slots__ = (
        "_base_path",
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: MuxConfig | None = None) -> None:
        self.config: MuxConfig = config or MuxConfig()
        self._base_path: str = normalize_base_path(self.config.base_path)
        self._router: Router = Router()
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    @property
    def base_path(self) -> str:
        """The normalized base path, always starting and ending with ``/``."""
        return self._base_path

    @property
    def router(self) -> Router:
        return self._router

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in registration (and match priority) order."""
        return self._router.routes

    # -- Route registration --

    def add(
        self,
        method: str,
        pattern: str,
        handler: Handler,
        *,
        name: str | None = None,
    ) -> Route:
        """Register *handler* for *method* and *pattern*.

        A leading ``/`` on *pattern* is ignored. Routes are matched in
        registration order, so register specific patterns before
        variable-heavy ones that would shadow them.

        Raises ``DuplicateRouteError`` or ``DuplicateNameError`` at once,
        leaving the route table unchanged.
        """
        self._check_not_frozen()
        return self._router.register(method, pattern, handler, name=name or "")

    def name(self, route: Route, name: str) -> Route:
        """Name an already registered route for ``build_path()``."""
        self._check_not_frozen()
        return self._router.name(route, name)

    def route(
        self,
        method: str,
        pattern: str,
        *,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Usage::

            @mux.route("GET", "users/{id}", name="profile")
            def profile(request):
                return {"id": request.path_params["id"]}
        """

        def decorator(func: Handler) -> Handler:
            self.add(method, pattern, func, name=name)
            return func

        return decorator

    # -- Lookup and building --

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Match a full request *path* (including the base path).

        Returns ``None`` when the path lies outside the base path or no
        route matches.
        """
        route_path = strip_base_path(path, self._base_path)
        if route_path is None:
            return None
        return self._router.match(method, route_path)

    def build_path(self, name: str, *values: Any) -> str:
        """Build a concrete path for the route named *name*.

        Raises ``RouteNotFoundError`` or ``MissingParameterError``.
        """
        return self._router.build_path(self._base_path, name, *values)

    # -- Errors --

    def error(
        self,
        code_or_exception: int | type[Exception],
    ) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler via decorator.

        Usage::

            @mux.error(404)
            def not_found(request):
                return f"Nothing at {request.path}"
        """

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async hook run at ASGI lifespan startup."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a sync or async hook run at ASGI lifespan shutdown."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the routes and serve with pounce."""
        from muxer.server.dev import run_server

        self._ensure_frozen()
        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.reload,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            base_path=self._base_path,
            error_handlers=self._error_handlers,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the routes at startup, then runs the registered hooks and
        signals completion back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self._run_hooks(self._startup_hooks)
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self._run_hooks(self._shutdown_hooks)
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def _run_hooks(self, hooks: list[Callable[..., Any]]) -> None:
        for hook in hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.freeze()
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the mux after it has started serving requests. "
                "Register routes and error handlers before serving."
            )
            raise RuntimeError(msg)
