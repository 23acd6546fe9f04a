"""Session object for the Shopify REST Admin API."""
from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from .errors import UrlParseError
from .transport import RequestsTransport, Transport


@dataclass(frozen=True)
class ShopifySession:
    """Credentials and connection for one Shopify store's REST Admin API.

    A session is immutable once built and holds no per-call state, so one
    instance can be shared by several threads issuing independent requests.

    Attributes:
        base_url: Absolute URL of the store (e.g. 'https://your-store.myshopify.com')
        api_key: Private app API key, sent as the basic-auth username
        password: Private app password, sent as the basic-auth secret
        api_version: The Shopify API version used by versioned paths (default: '2025-01')
        transport: Transport implementation for making HTTP requests (defaults to RequestsTransport)
        timeout: Per-request timeout in seconds (default: 30)

    Raises:
        UrlParseError: If ``base_url`` is not an absolute http(s) URL.
    """

    base_url: str
    api_key: str
    password: str = field(repr=False)
    api_version: str = "2025-01"
    transport: Transport = field(default_factory=RequestsTransport, repr=False)
    timeout: float = 30

    def __post_init__(self) -> None:
        base_url = self.base_url.strip().rstrip("/")
        try:
            parts = urlsplit(base_url)
        except ValueError as exc:
            raise UrlParseError(f"invalid base URL {self.base_url!r}: {exc}") from exc
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise UrlParseError(f"base URL must be an absolute http(s) URL: {self.base_url!r}")
        object.__setattr__(self, "base_url", base_url)

    def api_path(self, resource: str) -> str:
        """Return the versioned admin path for ``resource``.

        >>> session.api_path("orders.json")
        '/admin/api/2025-01/orders.json'
        """
        return f"/admin/api/{self.api_version}/{resource.lstrip('/')}"
