"""Fulfillment service resource."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from ..client import execute, request
from ..envelope import json_body
from ..session import ShopifySession
from .base import ShopifyModel


class FulfillmentServiceScope(str, Enum):
    CURRENT_CLIENT = "current_client"
    ALL = "all"


class FulfillmentService(ShopifyModel):
    id: int
    name: str
    handle: Optional[str] = None
    email: Optional[str] = None
    service_name: Optional[str] = None
    callback_url: Optional[str] = None
    format: Optional[str] = None
    include_pending_stock: Optional[bool] = None
    inventory_management: Optional[bool] = None
    tracking_support: Optional[bool] = None
    requires_shipping_method: Optional[bool] = None
    fulfillment_orders_opt_in: Optional[bool] = None
    provider_id: Optional[int] = None
    location_id: Optional[int] = None


class NewFulfillmentService(ShopifyModel):
    name: str
    callback_url: str
    inventory_management: bool
    tracking_support: bool
    requires_shipping_method: bool
    format: str = "json"
    fulfillment_orders_opt_in: Optional[bool] = None


class UpdateFulfillmentService(ShopifyModel):
    name: Optional[str] = None
    callback_url: Optional[str] = None
    inventory_management: Optional[bool] = None
    tracking_support: Optional[bool] = None
    requires_shipping_method: Optional[bool] = None
    fulfillment_orders_opt_in: Optional[bool] = None


def _path(session: ShopifySession, id: int | None = None) -> str:
    if id is None:
        return session.api_path("fulfillment_services.json")
    return session.api_path(f"fulfillment_services/{id}.json")


def list_fulfillment_services(
    session: ShopifySession, scope: FulfillmentServiceScope | None = None
) -> list[FulfillmentService]:
    return request(
        session,
        "GET",
        _path(session),
        "fulfillment_services",
        list[FulfillmentService],
        ("scope", scope),
    )


def get_fulfillment_service(session: ShopifySession, id: int) -> FulfillmentService:
    return request(session, "GET", _path(session, id), "fulfillment_service", FulfillmentService)


def create_fulfillment_service(
    session: ShopifySession, service: NewFulfillmentService
) -> FulfillmentService:
    return request(
        session,
        "POST",
        _path(session),
        "fulfillment_service",
        FulfillmentService,
        body_hook=json_body("fulfillment_service", service),
    )


def update_fulfillment_service(
    session: ShopifySession, id: int, update: UpdateFulfillmentService
) -> FulfillmentService:
    return request(
        session,
        "PUT",
        _path(session, id),
        "fulfillment_service",
        FulfillmentService,
        body_hook=json_body("fulfillment_service", update),
    )


def delete_fulfillment_service(session: ShopifySession, id: int) -> None:
    """Delete a fulfillment service. Wrap with ``optional`` to ignore 404."""
    execute(session, "DELETE", _path(session, id))
