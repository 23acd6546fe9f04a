"""Caller-side retry loop.

The request pipeline never retries on its own; callers that want to can wrap
an operation with :func:`call_with_retry`, which consults ``should_retry``.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from .errors import ShopifyError, should_retry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def call_with_retry(
    func: Callable[..., T],
    *args,
    retries: int = 2,
    backoff: float = 1.0,
    **kwargs,
) -> T:
    """Call ``func`` and retry retry-worthy failures with exponential backoff.

    Args:
        func: The operation, e.g. ``get_order``
        retries: Number of extra attempts after the first one (default: 2)
        backoff: Base delay in seconds; attempt ``n`` sleeps ``backoff * 2 ** n``

    Raises:
        ShopifyError: The last error, or the first non-retryable one.
        ValueError: If ``retries`` is negative.
    """
    if retries < 0:
        raise ValueError(f"retries must be >= 0, got {retries}")
    attempt = 0
    while True:
        try:
            return func(*args, **kwargs)
        except ShopifyError as exc:
            if attempt >= retries or not should_retry(exc):
                raise
            delay = backoff * 2 ** attempt
            logger.warning("retrying in %.1fs after %s", delay, exc)
            time.sleep(delay)
            attempt += 1
