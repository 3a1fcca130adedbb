"""Serve a Mux with pounce.

pounce's ``run()`` takes an import string, but callers usually hold a
live ``Mux`` object, so ``pounce.Server`` is driven directly with the
ASGI callable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from muxer.mux import Mux


def run_server(
    mux: Mux,
    host: str,
    port: int,
    *,
    reload: bool = False,
    log_level: str = "info",
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server for *mux*.

    Args:
        mux: The ASGI application.
        host: Bind host address.
        port: Bind port number.
        reload: Restart on source changes (requires *app_path*).
        log_level: Server log level (``"debug"``, ``"info"``, ...).
        app_path: Optional ``"module:attribute"`` import string; pounce
            reimports it on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload and app_path is not None,
        log_level=log_level,
    )
    server = Server(config, mux, app_path=app_path)
    server.run()
