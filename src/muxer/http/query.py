"""Immutable query string parameters."""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Parsed query string. ``get_list`` returns every value for a key."""

    _data: dict[str, list[str]]
    _raw: bytes

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes = b"") -> None:
        object.__setattr__(self, "_raw", query_string)
        parsed = parse_qs(query_string.decode("latin-1"), keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"QueryParams({self._raw.decode('latin-1')!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        values = self._data.get(key)
        return values[0] if values else default

    def get_list(self, key: str) -> list[str]:
        return list(self._data.get(key, []))

    @property
    def raw(self) -> bytes:
        return self._raw
