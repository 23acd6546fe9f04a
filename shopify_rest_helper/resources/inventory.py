"""Locations and inventory levels."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator, Optional, Sequence

from ..client import request, request_paginated
from ..paginate import PageCursor, Paginated, iter_items, iter_pages
from ..query import QueryParams
from ..session import ShopifySession
from .base import ShopifyModel


class Location(ShopifyModel):
    id: int
    name: str
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    phone: Optional[str] = None
    legacy: Optional[bool] = None
    active: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InventoryLevel(ShopifyModel):
    inventory_item_id: int
    location_id: int
    # null when the item is not tracked at the location
    available: Any = None
    admin_graphql_api_id: Optional[str] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class GetInventoryLevelsParams(QueryParams):
    inventory_item_ids: Optional[Sequence[int]] = None
    location_ids: Optional[Sequence[int]] = None
    limit: Optional[int] = None
    updated_at_min: Optional[datetime] = None


def list_locations(session: ShopifySession) -> list[Location]:
    return request(session, "GET", session.api_path("locations.json"), "locations", list[Location])


def get_location(session: ShopifySession, id: int) -> Location:
    path = session.api_path(f"locations/{id}.json")
    return request(session, "GET", path, "location", Location)


def list_inventory_levels(
    session: ShopifySession, params: GetInventoryLevelsParams
) -> Paginated[list[InventoryLevel]]:
    """Fetch the first page of inventory levels.

    Shopify requires ``inventory_item_ids`` or ``location_ids``.
    """
    return request_paginated(
        session,
        "GET",
        session.api_path("inventory_levels.json"),
        "inventory_levels",
        list[InventoryLevel],
        params,
    )


def list_inventory_levels_page(
    session: ShopifySession, cursor: PageCursor
) -> Paginated[list[InventoryLevel]]:
    return request_paginated(
        session,
        "GET",
        session.api_path("inventory_levels.json"),
        "inventory_levels",
        list[InventoryLevel],
        cursor,
    )


def iter_inventory_levels(
    session: ShopifySession, params: GetInventoryLevelsParams
) -> Iterator[InventoryLevel]:
    return iter_items(
        iter_pages(
            lambda: list_inventory_levels(session, params),
            lambda cursor: list_inventory_levels_page(session, cursor),
            limit=params.limit,
        )
    )
