"""Shared pieces of the resource schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ShopifyModel(BaseModel):
    """Base model for Shopify REST resources.

    Unknown fields are ignored so new API fields never break decoding. Fields
    whose shape Shopify leaves unspecified are typed ``Any``.
    """

    model_config = ConfigDict(extra="ignore")
