"""Public API exports."""
from .session import ShopifySession
from .client import execute, request, request_paginated
from .errors import (
    InvalidResponseError,
    MissingPageCursorError,
    NotFoundError,
    RequestFailedError,
    ShopifyError,
    TransportError,
    UrlParseError,
    optional,
    should_retry,
)
from .paginate import PageCursor, Paginated, iter_items, iter_pages, resume_pages
from .query import QueryParams

__all__ = [
    "ShopifySession",
    "execute",
    "request",
    "request_paginated",
    "ShopifyError",
    "NotFoundError",
    "RequestFailedError",
    "InvalidResponseError",
    "TransportError",
    "UrlParseError",
    "MissingPageCursorError",
    "optional",
    "should_retry",
    "PageCursor",
    "Paginated",
    "iter_pages",
    "iter_items",
    "resume_pages",
    "QueryParams",
]
