"""Path parameter bindings captured by a route match.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
A pattern may repeat a variable name (``{id}/x/{id}``); every captured
value is kept, in left-to-right order.
"""

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import urlencode


class PathParams(Mapping[str, str]):
    """Immutable multi-valued path parameters.

    ``__getitem__`` returns the first value captured for a name.
    ``get_list`` returns all values captured for a name.
    """

    _data: dict[str, list[str]]
    _items: tuple[tuple[str, str], ...]

    __slots__ = ("_data", "_items")

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        pairs = tuple(items)
        data: dict[str, list[str]] = {}
        for name, value in pairs:
            data.setdefault(name, []).append(value)
        object.__setattr__(self, "_items", pairs)
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._items)
        return f"PathParams([{items}])"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values captured for *key*."""
        return list(self._data.get(key, []))

    def multi_items(self) -> list[tuple[str, str]]:
        """Return every ``(name, value)`` pair in capture order."""
        return list(self._items)

    def encode(self) -> str:
        """Encode as a query string, sorted by name (``action=show&id=alex``)."""
        ordered = sorted(self._items, key=lambda pair: pair[0])
        return urlencode(ordered)
