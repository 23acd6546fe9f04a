"""Product variant resource."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator, Mapping, Optional, Sequence, Union

from ..client import request, request_paginated
from ..envelope import json_body
from ..paginate import PageCursor, Paginated, iter_items, iter_pages
from ..query import QueryParams
from ..session import ShopifySession
from .base import ShopifyModel


class Variant(ShopifyModel):
    id: int
    product_id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[str] = None
    compare_at_price: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    position: Optional[int] = None
    inventory_policy: Optional[str] = None
    inventory_management: Optional[str] = None
    inventory_item_id: Optional[int] = None
    inventory_quantity: Optional[int] = None
    fulfillment_service: Optional[str] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    taxable: Optional[bool] = None
    requires_shipping: Optional[bool] = None
    grams: Optional[int] = None
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    image_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None
    presentment_prices: Any = None


@dataclass(frozen=True)
class GetVariantListParams(QueryParams):
    ids: Optional[Sequence[int]] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    presentment_currencies: Optional[Sequence[str]] = None
    fields: Optional[Sequence[str]] = None


def _path(session: ShopifySession) -> str:
    return session.api_path("variants.json")


def list_variants(
    session: ShopifySession, params: GetVariantListParams | None = None
) -> Paginated[list[Variant]]:
    return request_paginated(
        session, "GET", _path(session), "variants", list[Variant], params
    )


def list_variants_page(
    session: ShopifySession, cursor: PageCursor
) -> Paginated[list[Variant]]:
    return request_paginated(
        session, "GET", _path(session), "variants", list[Variant], cursor
    )


def iter_variants(
    session: ShopifySession, params: GetVariantListParams | None = None
) -> Iterator[Variant]:
    """Yield every variant matching ``params``, fetching pages lazily."""
    limit = params.limit if params is not None else None
    fields = params.fields if params is not None else None
    return iter_items(
        iter_pages(
            lambda: list_variants(session, params),
            lambda cursor: list_variants_page(session, cursor),
            limit=limit,
            fields=fields,
        )
    )


def get_variant(session: ShopifySession, id: int) -> Variant:
    path = session.api_path(f"variants/{id}.json")
    return request(session, "GET", path, "variant", Variant)


def update_variant(
    session: ShopifySession, id: int, value: Union[Mapping[str, Any], ShopifyModel]
) -> Variant:
    """Update a variant; ``value`` holds only the fields to change."""
    path = session.api_path(f"variants/{id}.json")
    return request(
        session, "PUT", path, "variant", Variant, body_hook=json_body("variant", value)
    )
