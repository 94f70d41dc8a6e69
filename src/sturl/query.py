"""sturl.query
Ordered query parameters, with '+' standing in for ' '.
"""

from typing import Iterable, Iterator, Self

from .encoding import decode_query_component, encode_query_component


class QueryParams:
    """An ordered, immutable sequence of (key, value) pairs. Keys may repeat."""

    __slots__ = ("_pairs",)

    def __init__(self: Self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._pairs: tuple[tuple[str, str], ...] = tuple((key, value) for key, value in pairs)

    def __iter__(self: Self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self: Self) -> int:
        return len(self._pairs)

    def __contains__(self: Self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __getitem__(self: Self, key: str) -> str:
        """The first value for key, or "" if there is none."""
        return self.get(key, "")

    def __eq__(self: Self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self._pairs == other._pairs
        if isinstance(other, (list, tuple)):
            return all(isinstance(pair, (list, tuple)) for pair in other) and self._pairs == tuple(
                tuple(pair) for pair in other
            )
        return NotImplemented

    def __hash__(self: Self) -> int:
        return hash(self._pairs)

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({list(self._pairs)!r})"

    def __str__(self: Self) -> str:
        """name=ferret&color=purple"""
        return "&".join(f"{encode_query_component(k)}={encode_query_component(v)}" for k, v in self._pairs)

    def get(self: Self, key: str, default: str | None = None) -> str | None:
        for k, v in self._pairs:
            if k == key:
                return v
        return default

    def getall(self: Self, key: str) -> list[str]:
        return [v for k, v in self._pairs if k == key]

    def add(self: Self, key: str, value: str) -> Self:
        return self.__class__((*self._pairs, (key, value)))

    def set(self: Self, key: str, value: str) -> Self:
        """Replaces the first value for key, or appends the pair if key is absent."""
        pairs: list[tuple[str, str]] = list(self._pairs)
        for i, (k, _) in enumerate(pairs):
            if k == key:
                pairs[i] = (key, value)
                return self.__class__(pairs)
        pairs.append((key, value))
        return self.__class__(pairs)


def parse_search(search: str) -> QueryParams:
    """Parses the part of a URL after '?' into pairs.
    e.g. parse_search("name=&age&legs=4") == [("name", ""), ("age", ""), ("legs", "4")]
    A trailing '&' does not produce an empty pair; an empty pair anywhere else does.
    """
    pairs: list[str] = search.split("&")
    if pairs[-1] == "":
        pairs.pop()
    result: list[tuple[str, str]] = []
    for pair in pairs:
        key, _, value = pair.partition("=")
        result.append((decode_query_component(key), decode_query_component(value)))
    return QueryParams(result)
