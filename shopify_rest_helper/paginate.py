"""Cursor pagination helpers.

List endpoints answer with a ``Link`` header such as::

    <https://shop.myshopify.com/admin/api/2025-01/orders.json?limit=50&page_info=abc>; rel="next"

The ``page_info`` value is an opaque cursor. Once pagination has started the
cursor encodes every filter of the original request, so follow-up pages are
requested with the cursor alone (plus an optional ``limit``/``fields``).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Sequence,
    TypeVar,
    Union,
)
from urllib.parse import parse_qs, urlsplit

from requests.utils import parse_header_links

from .errors import MissingPageCursorError, UrlParseError
from .query import QueryPairs, QueryParams, encode_value

T = TypeVar("T")
U = TypeVar("U")

PREVIOUS_RELS = frozenset({"prev", "previous"})
NEXT_RELS = frozenset({"next"})


@dataclass(frozen=True)
class PageCursor(QueryParams):
    """Parameters for fetching a page by cursor.

    Only relay ``page_info`` values returned by Shopify; never build them.
    """

    page_info: str
    limit: Optional[int] = None
    fields: Union[str, Sequence[str], None] = None

    def with_limit(self, limit: int) -> "PageCursor":
        return replace(self, limit=limit)

    def as_query_pairs(self) -> QueryPairs:
        pairs = [("page_info", self.page_info)]
        if self.limit is not None:
            pairs.append(("limit", encode_value(self.limit)))
        if self.fields is not None:
            pairs.append(("fields", encode_value(self.fields)))
        return pairs


@dataclass(frozen=True)
class Paginated(Generic[T]):
    """One fetched page plus the cursors of its neighbours.

    ``next_cursor is None`` means this is the last page.
    """

    payload: T
    previous_cursor: Optional[str] = None
    next_cursor: Optional[str] = None

    @property
    def has_next(self) -> bool:
        return self.next_cursor is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_cursor is not None

    def map(self, func: Callable[[T], U]) -> "Paginated[U]":
        """Transform the payload, keeping both cursors untouched."""
        return Paginated(func(self.payload), self.previous_cursor, self.next_cursor)

    def next_page(
        self, limit: int | None = None, fields: Sequence[str] | None = None
    ) -> Optional[PageCursor]:
        if self.next_cursor is None:
            return None
        return PageCursor(self.next_cursor, limit, fields)

    def previous_page(
        self, limit: int | None = None, fields: Sequence[str] | None = None
    ) -> Optional[PageCursor]:
        if self.previous_cursor is None:
            return None
        return PageCursor(self.previous_cursor, limit, fields)


def parse_page_info(url: str, rel: str = "next") -> str:
    """Return the ``page_info`` query parameter of ``url``.

    Raises:
        UrlParseError: If ``url`` cannot be parsed.
        MissingPageCursorError: If the URL has no ``page_info`` parameter.
    """
    try:
        query = urlsplit(url).query
    except ValueError as exc:
        raise UrlParseError(f"invalid pagination URL {url!r}: {exc}") from exc
    values = parse_qs(query, keep_blank_values=True).get("page_info")
    if not values or not values[0]:
        raise MissingPageCursorError(rel, url)
    return values[0]


def parse_link_header(value: str | None) -> tuple[Optional[str], Optional[str]]:
    """Extract ``(previous_cursor, next_cursor)`` from a ``Link`` header value.

    Relations other than prev/previous/next are ignored. A missing or empty
    header means there are no adjacent pages.
    """
    previous_cursor: Optional[str] = None
    next_cursor: Optional[str] = None
    if not value:
        return previous_cursor, next_cursor
    for link in parse_header_links(value):
        url = link.get("url", "")
        rels = set(link.get("rel", "").lower().split())
        if rels & PREVIOUS_RELS:
            previous_cursor = parse_page_info(url, "previous")
        if rels & NEXT_RELS:
            next_cursor = parse_page_info(url, "next")
    return previous_cursor, next_cursor


def iter_pages(
    fetch_first: Callable[[], Paginated[T]],
    fetch_page: Callable[[PageCursor], Paginated[T]],
    *,
    limit: int | None = None,
    fields: Sequence[str] | None = None,
) -> Iterator[Paginated[T]]:
    """Lazily yield pages, following ``next`` cursors until the last page.

    Nothing is fetched until the first item is requested. ``limit`` and
    ``fields`` are carried onto every cursor request.

    Args:
        fetch_first: Fetches the first page with the caller's filters.
        fetch_page: Fetches a page given a ``PageCursor``.
        limit: Optional page size for follow-up pages.
        fields: Optional field projection for follow-up pages.

    Example:
        >>> pages = iter_pages(
        ...     lambda: list_orders(session, params),
        ...     lambda cursor: list_orders_page(session, cursor),
        ... )
        >>> for page in pages:
        ...     handle(page.payload)
    """
    page = fetch_first()
    while True:
        yield page
        cursor = page.next_page(limit, fields)
        if cursor is None:
            return
        page = fetch_page(cursor)


def resume_pages(
    cursor: PageCursor,
    fetch_page: Callable[[PageCursor], Paginated[T]],
) -> Iterator[Paginated[T]]:
    """Restart iteration from a previously retained cursor."""
    return iter_pages(
        lambda: fetch_page(cursor),
        fetch_page,
        limit=cursor.limit,
        fields=cursor.fields,
    )


def iter_items(pages: Iterable[Paginated[Iterable[Any]]]) -> Iterator[Any]:
    """Yield the items of each page's list payload, one at a time."""
    for page in pages:
        yield from page.payload
