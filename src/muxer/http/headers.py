"""Immutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
Keeps the raw byte pairs from the ASGI scope and decodes on access.
"""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive request headers."""

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        object.__setattr__(self, "_raw", raw)

    def _matching(self, key: str) -> Iterator[str]:
        wanted = key.lower().encode("latin-1")
        for name, value in self._raw:
            if name.lower() == wanted:
                yield value.decode("latin-1")

    def __getitem__(self, key: str) -> str:
        for value in self._matching(key):
            return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return next(self._matching(key), None) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name.decode("latin-1").lower() for name, _ in self._raw))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        return next(self._matching(key), default)

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._matching(key))

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Raw header byte pairs, as received from ASGI."""
        return self._raw
