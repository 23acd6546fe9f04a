"""Order fulfillments.

New fulfillments are assembled with :class:`FulfillmentBuilder`, whose
``build()`` step produces an immutable :class:`NewFulfillment`.

Example:
    >>> fulfillment = (
    ...     FulfillmentBuilder()
    ...     .add_item(59878440973, 1)
    ...     .tracking_number("1Z30434EDG37750543")
    ...     .build()
    ... )
    >>> create_fulfillment(session, 33673216013, fulfillment)
"""
from __future__ import annotations

from typing import Iterable, Optional

from pydantic import ConfigDict, Field

from ..client import request
from ..envelope import json_body
from ..session import ShopifySession
from .base import ShopifyModel
from .orders import Fulfillment


class FulfillmentLineItem(ShopifyModel):
    model_config = ConfigDict(frozen=True)

    id: int
    quantity: Optional[int] = None


class NewFulfillment(ShopifyModel):
    model_config = ConfigDict(frozen=True)

    location_id: Optional[int] = None
    tracking_company: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_numbers: Optional[tuple[str, ...]] = None
    tracking_url: Optional[str] = None
    notify_customer: Optional[bool] = None
    line_items: tuple[FulfillmentLineItem, ...] = Field(default_factory=tuple)


class FulfillmentBuilder:
    """Chained, mutable construction of a :class:`NewFulfillment`."""

    def __init__(self) -> None:
        self._fields: dict = {}
        self._items: dict[int, Optional[int]] = {}

    def location_id(self, id: int) -> "FulfillmentBuilder":
        self._fields["location_id"] = id
        return self

    def tracking_number(self, value: str) -> "FulfillmentBuilder":
        self._fields["tracking_number"] = value
        self._fields["tracking_numbers"] = (value,)
        return self

    def tracking_numbers(self, values: Iterable[str]) -> "FulfillmentBuilder":
        self._fields["tracking_number"] = None
        self._fields["tracking_numbers"] = tuple(values)
        return self

    def tracking_company(self, value: str) -> "FulfillmentBuilder":
        self._fields["tracking_company"] = value
        return self

    def tracking_url(self, value: str) -> "FulfillmentBuilder":
        self._fields["tracking_url"] = value
        return self

    def notify_customer(self, value: bool) -> "FulfillmentBuilder":
        self._fields["notify_customer"] = value
        return self

    def add_item(self, id: int, quantity: Optional[int] = None) -> "FulfillmentBuilder":
        # An existing line item only gets its quantity replaced.
        self._items[id] = quantity
        return self

    def build(self) -> NewFulfillment:
        items = tuple(
            FulfillmentLineItem(id=id, quantity=quantity)
            for id, quantity in self._items.items()
        )
        return NewFulfillment(line_items=items, **self._fields)


def _fulfillment_path(
    session: ShopifySession, order_id: int, fulfillment_id: int, action: str = ""
) -> str:
    suffix = f"/{action}" if action else ""
    return session.api_path(f"orders/{order_id}/fulfillments/{fulfillment_id}{suffix}.json")


def create_fulfillment(
    session: ShopifySession, order_id: int, fulfillment: NewFulfillment
) -> Fulfillment:
    path = session.api_path(f"orders/{order_id}/fulfillments.json")
    return request(
        session,
        "POST",
        path,
        "fulfillment",
        Fulfillment,
        body_hook=json_body("fulfillment", fulfillment),
    )


def update_fulfillment(
    session: ShopifySession,
    order_id: int,
    fulfillment_id: int,
    fulfillment: NewFulfillment,
) -> Fulfillment:
    path = _fulfillment_path(session, order_id, fulfillment_id)
    return request(
        session,
        "PUT",
        path,
        "fulfillment",
        Fulfillment,
        body_hook=json_body("fulfillment", fulfillment),
    )


def complete_fulfillment(
    session: ShopifySession, order_id: int, fulfillment_id: int
) -> Fulfillment:
    path = _fulfillment_path(session, order_id, fulfillment_id, "complete")
    return request(session, "POST", path, "fulfillment", Fulfillment)


def open_fulfillment(
    session: ShopifySession, order_id: int, fulfillment_id: int
) -> Fulfillment:
    path = _fulfillment_path(session, order_id, fulfillment_id, "open")
    return request(session, "POST", path, "fulfillment", Fulfillment)


def cancel_fulfillment(
    session: ShopifySession, order_id: int, fulfillment_id: int
) -> Fulfillment:
    path = _fulfillment_path(session, order_id, fulfillment_id, "cancel")
    return request(session, "POST", path, "fulfillment", Fulfillment)
