"""Order resource."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Optional, Sequence

from pydantic import Field

from ..client import request, request_paginated
from ..envelope import dump, json_body
from ..paginate import PageCursor, Paginated, iter_items, iter_pages
from ..query import QueryParams
from ..session import ShopifySession
from .base import ShopifyModel


class FulfillmentStatus(str, Enum):
    FULFILLED = "fulfilled"
    PARTIAL = "partial"
    RESTOCKED = "restocked"
    NOT_ELIGIBLE = "not_eligible"


class FinancialStatus(str, Enum):
    PENDING = "pending"
    AUTHORIZED = "authorized"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    PARTIALLY_REFUNDED = "partially_refunded"
    REFUNDED = "refunded"
    VOIDED = "voided"


class ShipmentStatus(str, Enum):
    CONFIRMED = "confirmed"
    IN_TRANSIT = "in_transit"
    OUT_FOR_DELIVERY = "out_for_delivery"
    ATTEMPTED_DELIVERY = "attempted_delivery"
    DELIVERED = "delivered"
    FAILURE = "failure"
    LABEL_PRINTED = "label_printed"
    DELAYED = "delayed"
    READY_FOR_PICKUP = "ready_for_pickup"


class Address(ShopifyModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class CustomerAddress(Address):
    id: Optional[int] = None
    customer_id: Optional[int] = None
    country_name: Optional[str] = None
    default: Optional[bool] = None


class Customer(ShopifyModel):
    id: int
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    tags: Optional[str] = None
    note: Any = None
    orders_count: Optional[int] = None
    total_spent: Optional[str] = None
    last_order_id: Optional[int] = None
    last_order_name: Optional[str] = None
    verified_email: Optional[bool] = None
    tax_exempt: Optional[bool] = None
    multipass_identifier: Any = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    default_address: Optional[CustomerAddress] = None


class ClientDetails(ShopifyModel):
    browser_ip: Optional[str] = None
    accept_language: Optional[str] = None
    user_agent: Optional[str] = None
    session_hash: Any = None
    browser_width: Optional[int] = None
    browser_height: Optional[int] = None


class Property(ShopifyModel):
    name: str
    value: Any = None


class TaxLine(ShopifyModel):
    title: str
    price: str
    rate: float


class DiscountCode(ShopifyModel):
    code: str
    amount: str
    type: Optional[str] = None


class LineItemLocation(ShopifyModel):
    id: int
    name: Optional[str] = None
    country_code: Optional[str] = None
    province_code: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None


class LineItem(ShopifyModel):
    id: int
    variant_id: Optional[int] = None
    product_id: Optional[int] = None
    title: Optional[str] = None
    name: Optional[str] = None
    variant_title: Optional[str] = None
    vendor: Optional[str] = None
    sku: Optional[str] = None
    quantity: int = 0
    fulfillable_quantity: Optional[int] = None
    price: Optional[str] = None
    total_discount: Optional[str] = None
    grams: Optional[int] = None
    fulfillment_service: Optional[str] = None
    fulfillment_status: Optional[FulfillmentStatus] = None
    variant_inventory_management: Optional[str] = None
    requires_shipping: Optional[bool] = None
    taxable: Optional[bool] = None
    gift_card: Optional[bool] = None
    product_exists: Optional[bool] = None
    properties: list[Property] = Field(default_factory=list)
    tax_lines: list[TaxLine] = Field(default_factory=list)
    origin_location: Optional[LineItemLocation] = None
    destination_location: Optional[LineItemLocation] = None


class ShippingLine(ShopifyModel):
    id: int
    title: Optional[str] = None
    code: Optional[str] = None
    price: Optional[str] = None
    discounted_price: Optional[str] = None
    source: Optional[str] = None
    phone: Optional[str] = None
    carrier_identifier: Any = None
    requested_fulfillment_service_id: Any = None
    delivery_category: Any = None
    tax_lines: list[TaxLine] = Field(default_factory=list)


class Fulfillment(ShopifyModel):
    id: int
    order_id: Optional[int] = None
    location_id: Optional[int] = None
    status: Optional[str] = None
    service: Optional[str] = None
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tracking_company: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_numbers: list[str] = Field(default_factory=list)
    tracking_url: Optional[str] = None
    tracking_urls: list[str] = Field(default_factory=list)
    shipment_status: Optional[ShipmentStatus] = None
    receipt: Any = None
    line_items: list[LineItem] = Field(default_factory=list)


class Order(ShopifyModel):
    id: int
    name: Optional[str] = None
    number: Optional[int] = None
    order_number: Optional[int] = None
    email: Optional[str] = None
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    note: Optional[str] = None
    token: Optional[str] = None
    test: Optional[bool] = None
    confirmed: Optional[bool] = None
    currency: Optional[str] = None
    total_price: Optional[str] = None
    subtotal_price: Optional[str] = None
    total_tax: Optional[str] = None
    total_discounts: Optional[str] = None
    total_line_items_price: Optional[str] = None
    total_price_usd: Optional[str] = None
    total_weight: Optional[int] = None
    taxes_included: Optional[bool] = None
    financial_status: Optional[FinancialStatus] = None
    fulfillment_status: Optional[FulfillmentStatus] = None
    buyer_accepts_marketing: Optional[bool] = None
    cancel_reason: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    gateway: Optional[str] = None
    processing_method: Optional[str] = None
    source_name: Optional[str] = None
    source_url: Optional[str] = None
    order_status_url: Optional[str] = None
    browser_ip: Optional[str] = None
    customer_locale: Optional[str] = None
    cart_token: Optional[str] = None
    app_id: Optional[int] = None
    user_id: Optional[int] = None
    location_id: Optional[int] = None
    tags: Optional[str] = None
    referring_site: Any = None
    landing_site: Any = None
    landing_site_ref: Any = None
    checkout_id: Any = None
    checkout_token: Any = None
    reference: Any = None
    source_identifier: Any = None
    device_id: Any = None
    payment_gateway_names: list[str] = Field(default_factory=list)
    discount_codes: list[DiscountCode] = Field(default_factory=list)
    note_attributes: list[Property] = Field(default_factory=list)
    tax_lines: list[TaxLine] = Field(default_factory=list)
    line_items: list[LineItem] = Field(default_factory=list)
    shipping_lines: list[ShippingLine] = Field(default_factory=list)
    fulfillments: list[Fulfillment] = Field(default_factory=list)
    refunds: list[Any] = Field(default_factory=list)
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    client_details: Optional[ClientDetails] = None
    customer: Optional[Customer] = None


class OrderRisk(ShopifyModel):
    id: Optional[int] = None
    order_id: Optional[int] = None
    checkout_id: Optional[int] = None
    source: Optional[str] = None
    score: Optional[str] = None
    recommendation: Optional[str] = None
    message: Optional[str] = None
    display: Optional[bool] = None
    cause_cancel: Optional[bool] = None


class OrderUpdate(ShopifyModel):
    """Editable order fields; unset fields are left out of the request."""

    buyer_accepts_marketing: Optional[bool] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    note: Optional[str] = None
    tags: Optional[str] = None
    shipping_address: Optional[Address] = None


@dataclass(frozen=True)
class GetOrderListParams(QueryParams):
    ids: Optional[Sequence[int]] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    processed_at_min: Optional[datetime] = None
    processed_at_max: Optional[datetime] = None
    attribution_app_id: Optional[str] = None
    status: Optional[str] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    fields: Optional[Sequence[str]] = None


def _path(session: ShopifySession) -> str:
    return session.api_path("orders.json")


def list_orders(
    session: ShopifySession, params: GetOrderListParams | None = None
) -> Paginated[list[Order]]:
    """Fetch the first page of orders matching ``params``.

    Shopify only returns open orders unless ``status="any"`` is given.
    """
    return request_paginated(
        session, "GET", _path(session), "orders", list[Order], params
    )


def list_orders_page(
    session: ShopifySession, cursor: PageCursor
) -> Paginated[list[Order]]:
    return request_paginated(
        session, "GET", _path(session), "orders", list[Order], cursor
    )


def iter_orders(
    session: ShopifySession, params: GetOrderListParams | None = None
) -> Iterator[Order]:
    limit = params.limit if params is not None else None
    fields = params.fields if params is not None else None
    return iter_items(
        iter_pages(
            lambda: list_orders(session, params),
            lambda cursor: list_orders_page(session, cursor),
            limit=limit,
            fields=fields,
        )
    )


def get_order(session: ShopifySession, id: int) -> Order:
    path = session.api_path(f"orders/{id}.json")
    return request(session, "GET", path, "order", Order)


def update_order(session: ShopifySession, id: int, update: OrderUpdate) -> Order:
    path = session.api_path(f"orders/{id}.json")
    body = {"id": id, **dump(update)}
    return request(
        session, "PUT", path, "order", Order, body_hook=json_body("order", body)
    )


def list_order_risks(session: ShopifySession, order_id: int) -> list[OrderRisk]:
    path = session.api_path(f"orders/{order_id}/risks.json")
    return request(session, "GET", path, "risks", list[OrderRisk])
