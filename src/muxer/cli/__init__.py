"""Muxer CLI — route listing, path building, and serving.

Entry point registered as ``muxer`` in ``pyproject.toml``::

    [project.scripts]
    muxer = "muxer.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``muxer`` command."""
    parser = argparse.ArgumentParser(
        prog="muxer",
        description="muxer — a simple URL-path muxer without regular expressions.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- muxer routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:mux)")

    # -- muxer build ------------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a path from a named route")
    build_parser.add_argument("app", help="Import string (e.g. myapp:mux)")
    build_parser.add_argument("name", help="Route name")
    build_parser.add_argument("values", nargs="*", help="Values for the variable segments")

    # -- muxer run --------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve the mux with pounce")
    run_parser.add_argument("app", help="Import string (e.g. myapp:mux)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Reimport the app when source files change",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from muxer.cli._routes import run_routes

        run_routes(args)
    elif args.command == "build":
        from muxer.cli._build import run_build

        run_build(args)
    elif args.command == "run":
        from muxer.cli._run import run_server

        run_server(args)
