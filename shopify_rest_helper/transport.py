"""Transport abstractions."""
from __future__ import annotations

from abc import ABC, abstractmethod
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import requests


class Transport(ABC):
    """Abstract transport interface.

    A transport performs exactly one round trip per call and never retries.
    """

    @abstractmethod
    def send(
        self,
        request: "requests.Request",
        timeout: float,
    ) -> "requests.Response":  # noqa: D401
        """Send a fully built request."""
        raise NotImplementedError


class RequestsTransport(Transport):
    """Transport using a pooled ``requests.Session``.

    Connections are reused across calls. The mounted adapter is configured
    with a zero-retry policy so a failure surfaces on the first attempt;
    retrying is the caller's decision.

    Args:
        pool_maxsize: Connections kept per host. Defaults to the
            ``SHOPIFY_REST_POOL_MAXSIZE`` env var or ``10``.
        force_close: If True, send ``Connection: close`` with each request to
            disable keep-alives.
    """

    def __init__(
        self,
        *,
        pool_maxsize: int | None = None,
        force_close: bool = False,
    ) -> None:
        import requests
        from requests.adapters import HTTPAdapter
        from urllib3.util import Retry

        maxsize = pool_maxsize if pool_maxsize is not None else int(
            os.getenv("SHOPIFY_REST_POOL_MAXSIZE", "10")
        )
        retry = Retry(total=0, read=False, redirect=False, raise_on_status=False)
        adapter = HTTPAdapter(max_retries=retry, pool_maxsize=maxsize)
        session = requests.Session()
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        session.headers.setdefault("Accept", "application/json")
        if force_close:
            session.headers["Connection"] = "close"
        self._session = session

    def send(
        self,
        request: "requests.Request",
        timeout: float,
    ) -> "requests.Response":
        prepared = self._session.prepare_request(request)
        # proxies and CA bundle from the environment
        settings = self._session.merge_environment_settings(
            prepared.url, {}, None, None, None
        )
        return self._session.send(prepared, timeout=timeout, **settings)
