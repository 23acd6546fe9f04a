"""Product resource."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Sequence, Union

from pydantic import Field

from ..client import request, request_paginated
from ..envelope import json_body
from ..paginate import PageCursor, Paginated, iter_items, iter_pages
from ..query import QueryParams
from ..session import ShopifySession
from .base import ShopifyModel
from .variants import Variant


class ProductStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"
    DRAFT = "draft"


class Image(ShopifyModel):
    id: int
    product_id: Optional[int] = None
    position: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    src: Optional[str] = None
    variant_ids: list[int] = Field(default_factory=list)


class ProductOption(ShopifyModel):
    id: Optional[int] = None
    product_id: Optional[int] = None
    name: str
    position: Optional[int] = None
    values: list[str] = Field(default_factory=list)


class Product(ShopifyModel):
    id: int
    title: str
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[ProductStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    template_suffix: Any = None
    tags: Optional[str] = None
    variants: list[Variant] = Field(default_factory=list)
    options: list[ProductOption] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    image: Optional[Image] = None


@dataclass(frozen=True)
class GetProductListParams(QueryParams):
    ids: Optional[Sequence[int]] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    title: Optional[str] = None
    vendor: Optional[str] = None
    handle: Optional[str] = None
    product_type: Optional[str] = None
    status: Optional[ProductStatus] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    fields: Optional[Sequence[str]] = None


def _path(session: ShopifySession) -> str:
    return session.api_path("products.json")


def list_products(
    session: ShopifySession, params: GetProductListParams | None = None
) -> Paginated[list[Product]]:
    """Fetch the first page of products matching ``params``.

    Follow ``page.next_page()`` with :func:`list_products_page` for the rest.
    """
    return request_paginated(
        session, "GET", _path(session), "products", list[Product], params
    )


def list_products_page(
    session: ShopifySession, cursor: PageCursor
) -> Paginated[list[Product]]:
    return request_paginated(
        session, "GET", _path(session), "products", list[Product], cursor
    )


def iter_products(
    session: ShopifySession, params: GetProductListParams | None = None
) -> Iterator[Product]:
    """Yield every product matching ``params``, fetching pages lazily."""
    limit = params.limit if params is not None else None
    fields = params.fields if params is not None else None
    return iter_items(
        iter_pages(
            lambda: list_products(session, params),
            lambda cursor: list_products_page(session, cursor),
            limit=limit,
            fields=fields,
        )
    )


def get_product(session: ShopifySession, id: int) -> Product:
    path = session.api_path(f"products/{id}.json")
    return request(session, "GET", path, "product", Product)


def update_product(
    session: ShopifySession, id: int, value: Union[Mapping[str, Any], ShopifyModel]
) -> Product:
    """Update a product; ``value`` holds only the fields to change."""
    path = session.api_path(f"products/{id}.json")
    return request(
        session, "PUT", path, "product", Product, body_hook=json_body("product", value)
    )
