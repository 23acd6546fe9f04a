"""Fulfillment order resource."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..client import request
from ..envelope import json_body
from ..session import ShopifySession
from .base import ShopifyModel


class FulfillmentOrderStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    ON_HOLD = "on_hold"
    INCOMPLETE = "incomplete"
    CLOSED = "closed"


class AssignedLocation(ShopifyModel):
    location_id: Optional[int] = None
    name: Optional[str] = None
    address1: Optional[str] = None
    address2: Any = None
    city: Optional[str] = None
    province: Optional[str] = None
    country_code: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None


class DeliveryMethod(ShopifyModel):
    id: Optional[int] = None
    method_type: Optional[str] = None
    min_delivery_date_time: Any = None
    max_delivery_date_time: Any = None


class FulfillmentOrderLineItem(ShopifyModel):
    id: int
    line_item_id: int
    fulfillment_order_id: Optional[int] = None
    shop_id: Optional[int] = None
    inventory_item_id: Optional[int] = None
    variant_id: Optional[int] = None
    quantity: Optional[int] = None
    fulfillable_quantity: Optional[int] = None


class FulfillmentOrder(ShopifyModel):
    id: int
    shop_id: Optional[int] = None
    order_id: Optional[int] = None
    assigned_location_id: Optional[int] = None
    assigned_location: Optional[AssignedLocation] = None
    status: FulfillmentOrderStatus
    request_status: Optional[str] = None
    supported_actions: list[str] = Field(default_factory=list)
    delivery_method: Optional[DeliveryMethod] = None
    line_items: list[FulfillmentOrderLineItem] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    fulfill_at: Optional[datetime] = None
    fulfill_by: Any = None
    destination: Any = None
    international_duties: Any = None
    fulfillment_holds: list[Any] = Field(default_factory=list)
    merchant_requests: list[Any] = Field(default_factory=list)


class MoveLineItem(ShopifyModel):
    id: int
    quantity: int


class MoveFulfillmentOrderRequest(ShopifyModel):
    """Moves a fulfillment order (or some of its line items) to a new location.

    Leaving ``fulfillment_order_line_items`` unset moves every line item.
    """

    new_location_id: int
    fulfillment_order_line_items: Optional[list[MoveLineItem]] = None


class MoveFulfillmentOrderResponse(ShopifyModel):
    original_fulfillment_order: FulfillmentOrder
    moved_fulfillment_order: Optional[FulfillmentOrder] = None
    remaining_fulfillment_order: Optional[FulfillmentOrder] = None


def list_fulfillment_orders(
    session: ShopifySession, order_id: int
) -> list[FulfillmentOrder]:
    path = session.api_path(f"orders/{order_id}/fulfillment_orders.json")
    return request(session, "GET", path, "fulfillment_orders", list[FulfillmentOrder])


def get_fulfillment_order(session: ShopifySession, id: int) -> FulfillmentOrder:
    path = session.api_path(f"fulfillment_orders/{id}.json")
    return request(session, "GET", path, "fulfillment_order", FulfillmentOrder)


def move_fulfillment_order(
    session: ShopifySession, id: int, move: MoveFulfillmentOrderRequest
) -> MoveFulfillmentOrderResponse:
    """Move a fulfillment order; the response body is not enveloped."""
    path = session.api_path(f"fulfillment_orders/{id}/move.json")
    return request(
        session,
        "POST",
        path,
        None,
        MoveFulfillmentOrderResponse,
        body_hook=json_body("fulfillment_order", move),
    )
