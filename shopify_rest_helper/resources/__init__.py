"""Typed wrappers for individual REST Admin API resources."""
from . import (
    fulfillment_orders,
    fulfillment_services,
    fulfillments,
    inventory,
    orders,
    products,
    shop,
    variants,
)

__all__ = [
    "fulfillment_orders",
    "fulfillment_services",
    "fulfillments",
    "inventory",
    "orders",
    "products",
    "shop",
    "variants",
]
