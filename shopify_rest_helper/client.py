"""Client helpers."""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional
from urllib.parse import urljoin, urlsplit

import requests
from requests.auth import HTTPBasicAuth

from .envelope import Envelope
from .errors import (
    NotFoundError,
    RequestFailedError,
    TransportError,
    UrlParseError,
)
from .paginate import Paginated, parse_link_header
from .query import Query, as_query_pairs
from .session import ShopifySession

logger = logging.getLogger(__name__)

BodyHook = Callable[[requests.Request], Optional[requests.Request]]


def build_url(session: ShopifySession, path: str) -> str:
    """Resolve ``path`` against the session's base URL."""
    try:
        url = urljoin(session.base_url + "/", path)
        parts = urlsplit(url)
    except ValueError as exc:
        raise UrlParseError(f"cannot join {path!r} onto {session.base_url!r}: {exc}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlParseError(f"cannot join {path!r} onto {session.base_url!r}")
    base = urlsplit(session.base_url)
    if (parts.scheme, parts.netloc) != (base.scheme, base.netloc):
        # credentials are only ever sent to the shop itself
        raise UrlParseError(f"{path!r} leaves {session.base_url!r}")
    return url


def execute(
    session: ShopifySession,
    method: str,
    path: str,
    query: Query = None,
    body_hook: BodyHook | None = None,
) -> requests.Response:
    """Send one authenticated request and classify the response.

    Args:
        session: An authenticated ShopifySession instance
        method: HTTP method ("GET", "POST", ...)
        path: Path relative to the store's base URL
        query: Query parameters (``QueryParams``, ``(name, value)`` pairs or a list of them)
        body_hook: Called with the ``requests.Request`` before sending; may
            mutate it (e.g. attach a JSON body) or return a replacement

    Returns:
        requests.Response: The successful (2xx) response

    Raises:
        NotFoundError: On HTTP 404
        RequestFailedError: On any other non-2xx status
        TransportError: If the round trip itself fails
        UrlParseError: If the request URL cannot be built
    """
    request = requests.Request(
        method.upper(),
        build_url(session, path),
        params=as_query_pairs(query),
        auth=HTTPBasicAuth(session.api_key, session.password),
    )
    if body_hook is not None:
        request = body_hook(request) or request

    try:
        resp = session.transport.send(request, session.timeout)
    except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema) as exc:
        raise UrlParseError(str(exc)) from exc
    except (requests.RequestException, OSError) as exc:
        raise TransportError(f"{method.upper()} {path}: {exc}") from exc

    status = getattr(resp, "status_code", None)
    if status is None:
        raise TransportError("Transport response missing status_code")
    logger.debug("%s %s -> %s", method.upper(), path, status)
    if status == 404:
        raise NotFoundError(path)
    if not 200 <= status < 300:
        try:
            body = resp.text
        except (requests.RequestException, OSError) as exc:
            raise TransportError(f"{method.upper()} {path}: {exc}") from exc
        raise RequestFailedError(path, status, body)
    return resp


def request(
    session: ShopifySession,
    method: str,
    path: str,
    key: str | None,
    type_: Any,
    query: Query = None,
    body_hook: BodyHook | None = None,
) -> Any:
    """Execute a request and decode the payload nested under ``key``.

    Example:
        >>> shop = request(session, "GET", session.api_path("shop.json"), "shop", Shop)
    """
    resp = execute(session, method, path, query, body_hook)
    return Envelope(key, type_).decode(resp)


def request_paginated(
    session: ShopifySession,
    method: str,
    path: str,
    key: str | None,
    type_: Any,
    query: Query = None,
    body_hook: BodyHook | None = None,
) -> Paginated[Any]:
    """Like :func:`request`, bundling the page with its ``Link`` cursors."""
    resp = execute(session, method, path, query, body_hook)
    previous_cursor, next_cursor = parse_link_header(resp.headers.get("link"))
    payload = Envelope(key, type_).decode(resp)
    return Paginated(payload, previous_cursor, next_cursor)
