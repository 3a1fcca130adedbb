"""``muxer run`` — serve a mux with pounce."""

import argparse

from muxer.cli._resolve import resolve_or_exit


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it; CLI flags override ``MuxConfig``."""
    from muxer.server.dev import run_server as serve

    mux = resolve_or_exit(args.app)
    mux._ensure_frozen()

    serve(
        mux,
        args.host or mux.config.host,
        args.port or mux.config.port,
        reload=args.reload or mux.config.reload,
        log_level=mux.config.log_level,
        app_path=args.app,
    )
