"""Mux configuration.

MuxConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MuxConfig:
    """Mux configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = MuxConfig(base_path="/api", port=3000)
    """

    # Routing: prefix for every route, normalized to "/.../"
    base_path: str = ""

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # Logging level forwarded to the server
    log_level: str = "info"
