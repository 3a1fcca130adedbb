"""``muxer build`` — print the path built from a named route."""

import argparse
import sys

from muxer.cli._resolve import resolve_or_exit
from muxer.errors import BuildError


def run_build(args: argparse.Namespace) -> None:
    """Build ``args.name`` with ``args.values`` and print the path.

    Values are passed through as strings. Exits 1 on an unknown route
    or too few values.
    """
    mux = resolve_or_exit(args.app)
    try:
        path = mux.build_path(args.name, *args.values)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(path)
