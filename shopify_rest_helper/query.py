"""Query string encoding for typed parameter objects."""
from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Union

QueryPairs = list[tuple[str, str]]


def encode_value(value: Any) -> str:
    """Encode one query value.

    Integers become decimal strings, strings pass through, datetimes are
    rendered as RFC 3339 (naive values are taken as UTC) and sequences are
    comma-joined. Percent-encoding is left to URL construction.
    """
    if isinstance(value, Enum):
        return encode_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(encode_value(item) for item in value)
    raise TypeError(f"cannot encode {type(value).__name__} as a query value")


@dataclass(frozen=True)
class QueryParams:
    """Base class for endpoint parameter objects.

    Subclasses are dataclasses whose fields default to ``None``. Absent fields
    are skipped; present ones are emitted in declaration order.

    Example:
        >>> @dataclass(frozen=True)
        ... class ListParams(QueryParams):
        ...     ids: list[int] | None = None
        ...     limit: int | None = None
        >>> ListParams(ids=[1, 2, 3]).as_query_pairs()
        [('ids', '1,2,3')]
    """

    def as_query_pairs(self) -> QueryPairs:
        pairs: QueryPairs = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            pairs.append((f.name, encode_value(value)))
        return pairs


Query = Union[None, QueryParams, tuple, list]


def as_query_pairs(query: Query) -> QueryPairs:
    """Flatten any supported query shape into ordered string pairs.

    ``query`` may be ``None``, a ``QueryParams``, a single ``(name, value)``
    tuple, or a list of those (concatenated in order).
    """
    if query is None:
        return []
    if isinstance(query, QueryParams):
        return query.as_query_pairs()
    if isinstance(query, tuple) and len(query) == 2 and isinstance(query[0], str):
        name, value = query
        if value is None:
            return []
        return [(name, encode_value(value))]
    if isinstance(query, list):
        return join_queries(*query)
    raise TypeError(f"unsupported query object: {query!r}")


def join_queries(*parts: Query) -> QueryPairs:
    """Concatenate the pairs of several query parts in call order."""
    pairs: QueryPairs = []
    for part in parts:
        pairs.extend(as_query_pairs(part))
    return pairs
