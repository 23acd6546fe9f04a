"""Error classes for the Shopify REST helper."""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

T = TypeVar("T")

RETRYABLE_STATUSES = frozenset({429, 500, 503})


class ShopifyError(Exception):
    """Base class for every error raised by the Shopify REST helper."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        snippet = message if len(message) <= 300 else message[:300]
        if status_code is not None:
            msg = f"HTTP {status_code}: {snippet}"
        else:
            msg = snippet
        super().__init__(msg)
        self.status_code = status_code

    def should_retry(self) -> bool:
        """Whether re-issuing the identical request may succeed."""
        return False


class NotFoundError(ShopifyError):
    """The requested resource does not exist (HTTP 404)."""

    def __init__(self, path: str) -> None:
        super().__init__(f"not found: {path}", 404)
        self.path = path


class RequestFailedError(ShopifyError):
    """Shopify answered with a non-2xx status other than 404.

    ``body`` holds the complete response body; only the exception message is
    truncated.
    """

    def __init__(self, path: str, status_code: int, body: str) -> None:
        super().__init__(f"{path}: {body}", status_code)
        self.path = path
        self.body = body

    def should_retry(self) -> bool:
        return self.status_code in RETRYABLE_STATUSES


class InvalidResponseError(ShopifyError):
    """A successful response whose body does not match the expected shape."""


class TransportError(ShopifyError):
    """The HTTP round trip itself failed (connect, timeout, I/O)."""

    def should_retry(self) -> bool:
        return True


class UrlParseError(ShopifyError):
    """A base URL, joined request URL or pagination URL could not be parsed."""


class MissingPageCursorError(ShopifyError):
    """A ``Link`` relation was present but its URL carried no ``page_info``."""

    def __init__(self, rel: str, url: str) -> None:
        super().__init__(f"link rel={rel!r} has no page_info: {url}")
        self.rel = rel
        self.url = url


def should_retry(error: BaseException) -> bool:
    """Return True if ``error`` is worth retrying without client-side changes.

    Only ``RequestFailedError`` with status 429, 500 or 503 and
    ``TransportError`` qualify. The helper never retries by itself; see
    :func:`shopify_rest_helper.retry.call_with_retry` for a caller-side loop.
    """
    return isinstance(error, ShopifyError) and error.should_retry()


def optional(func: Callable[..., T], *args, **kwargs) -> Optional[T]:
    """Call ``func`` and turn a ``NotFoundError`` into ``None``.

    Any other error propagates unchanged.

    Example:
        >>> product = optional(get_product, session, 123)
        >>> if product is None:
        ...     print("gone")
    """
    try:
        return func(*args, **kwargs)
    except NotFoundError:
        return None
