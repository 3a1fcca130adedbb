"""Mux import resolution — resolves ``"module:attribute"`` strings to Mux instances.

Shared by every ``muxer`` subcommand.
"""

import importlib
import sys

from muxer.mux import Mux


def resolve_mux(import_string: str) -> Mux:
    """Resolve an import string to a Mux instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"mux"`` (``"myapp"`` resolves to ``myapp.mux``).
    Factory functions are called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``Mux`` or a factory
            returning one.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "mux"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Mux):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Mux):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a muxer.Mux instance"
        raise TypeError(msg)

    return obj


def resolve_or_exit(import_string: str) -> Mux:
    """Resolve *import_string*, printing the error and exiting 1 on failure."""
    try:
        return resolve_mux(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
