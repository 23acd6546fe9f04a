import pathlib
import sys
import time

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from shopify_rest_helper.errors import (
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
from shopify_rest_helper.retry import call_with_retry


def raiser(exc):
    def func(*args, **kwargs):
        raise exc

    return func


def test_optional_turns_not_found_into_none():
    assert optional(raiser(NotFoundError("/admin/orders/1.json"))) is None


def test_optional_wraps_success():
    assert optional(lambda a, b=0: a + b, 1, b=2) == 3


def test_optional_keeps_other_errors():
    err = RequestFailedError("/admin/orders.json", 500, "boom")
    with pytest.raises(RequestFailedError) as exc:
        optional(raiser(err))
    assert exc.value is err


@pytest.mark.parametrize(
    "error,expected",
    [
        (RequestFailedError("/p", 429, ""), True),
        (RequestFailedError("/p", 500, ""), True),
        (RequestFailedError("/p", 503, ""), True),
        (RequestFailedError("/p", 400, ""), False),
        (RequestFailedError("/p", 401, ""), False),
        (RequestFailedError("/p", 403, ""), False),
        (TransportError("reset"), True),
        (NotFoundError("/p"), False),
        (InvalidResponseError("bad"), False),
        (UrlParseError("bad"), False),
        (MissingPageCursorError("next", "https://x/y"), False),
        (ValueError("not ours"), False),
    ],
)
def test_should_retry(error, expected):
    assert should_retry(error) is expected


def test_message_is_truncated():
    err = ShopifyError("y" * 500, 400)
    assert str(err) == "HTTP 400: " + "y" * 300
    assert err.status_code == 400


def test_call_with_retry_retries_retryable(monkeypatch):
    slept = []
    monkeypatch.setattr(time, "sleep", lambda s: slept.append(s))
    outcomes = [TransportError("reset"), RequestFailedError("/p", 503, ""), "ok"]

    def flaky():
        result = outcomes.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    assert call_with_retry(flaky, retries=2, backoff=1) == "ok"
    assert slept == [1, 2]


def test_call_with_retry_gives_up(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda s: None)
    calls = []

    def always_busy():
        calls.append(1)
        raise RequestFailedError("/p", 429, "slow down")

    with pytest.raises(RequestFailedError):
        call_with_retry(always_busy, retries=2)
    assert len(calls) == 3


def test_call_with_retry_rejects_negative_retries():
    with pytest.raises(ValueError):
        call_with_retry(lambda: "ok", retries=-1)


def test_call_with_retry_does_not_retry_client_errors(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda s: pytest.fail("should not sleep"))
    calls = []

    def missing():
        calls.append(1)
        raise NotFoundError("/p")

    with pytest.raises(NotFoundError):
        call_with_retry(missing, retries=5)
    assert len(calls) == 1
