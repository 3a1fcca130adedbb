"""Pattern compilation and path helpers.

Patterns are plain ``/``-separated strings. A segment wrapped in braces
captures; everything else must match exactly::

    "users/{id}"         -> [Segment("users"), Segment("id", is_variable=True)]
    "{domain}/{action}"  -> [Segment("domain", True), Segment("action", True)]
    "a//b"               -> [Segment("a"), Segment(""), Segment("b")]
"""

import posixpath
from typing import Any

from muxer.routing.route import CompiledPattern, Segment

VAR_OPEN = "{"
VAR_CLOSE = "}"


def normalize_pattern(pattern: str) -> str:
    """Strip a single leading ``/`` from a route pattern."""
    if pattern.startswith("/"):
        return pattern[1:]
    return pattern


def compile_pattern(pattern: str) -> CompiledPattern:
    """Parse a normalized pattern into literal and variable segments.

    Empty tokens are kept as empty literals. No validation is applied to
    variable names, so ``{}`` binds the empty name.
    """
    segments: list[Segment] = []
    for token in pattern.split("/"):
        if token.startswith(VAR_OPEN) and token.endswith(VAR_CLOSE):
            segments.append(Segment(token[1:-1], is_variable=True))
        else:
            segments.append(Segment(token))
    return CompiledPattern(tuple(segments))


def normalize_base_path(base_path: str) -> str:
    """Ensure *base_path* begins and ends with ``/``.

    ``""`` and ``"/"`` both become ``"/"``; ``"api"`` becomes ``"/api/"``.
    """
    if not base_path.startswith("/"):
        base_path = "/" + base_path
    if not base_path.endswith("/"):
        base_path = base_path + "/"
    return base_path


def join_path(*elements: str) -> str:
    """Join path elements into a clean path.

    Empty elements are ignored. The result has no duplicate slashes,
    ``.`` and ``..`` are resolved, and there is no trailing slash
    (except for the root itself).
    """
    joined = "/".join(e for e in elements if e)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    # POSIX keeps a leading "//"; URL paths do not.
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def format_value(value: Any) -> str:
    """Stringify a path parameter value.

    Booleans render lowercase (``true``/``false``) to match how they read
    in URLs; everything else uses ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
