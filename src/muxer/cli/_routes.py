"""``muxer routes`` — list registered routes in match order."""

import argparse

from muxer.cli._resolve import resolve_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATTERN and HANDLER for ``args.app``.

    Rows follow registration order, which is also match priority.
    Patterns are shown with the mux base path applied.
    """
    mux = resolve_or_exit(args.app)

    routes = mux.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", repr(route.handler))
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((route.method, mux.base_path + route.pattern, handler_name))

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_pattern = max(7, *(len(r[1]) for r in rows))  # "PATTERN" header

    fmt = f"{{:<{max_method}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "HANDLER"))
    sep_len = max_method + max_pattern + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, pattern, handler_name in rows:
        print(fmt.format(method, pattern, handler_name))
