"""Shop resource."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..client import request
from ..session import ShopifySession
from .base import ShopifyModel


class Shop(ShopifyModel):
    """General settings and information about the shop."""

    id: int
    name: str
    email: Optional[str] = None
    domain: Optional[str] = None
    myshopify_domain: Optional[str] = None
    shop_owner: Optional[str] = None
    # Address
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    customer_email: Optional[str] = None
    currency: Optional[str] = None
    money_format: Optional[str] = None
    money_with_currency_format: Optional[str] = None
    weight_unit: Optional[str] = None
    plan_name: Optional[str] = None
    plan_display_name: Optional[str] = None
    primary_locale: Optional[str] = None
    timezone: Optional[str] = None
    iana_timezone: Optional[str] = None
    source: Optional[str] = None
    google_apps_domain: Optional[str] = None
    google_apps_login_enabled: Optional[bool] = None
    has_discounts: Optional[bool] = None
    has_gift_cards: Optional[bool] = None
    has_storefront: Optional[bool] = None
    password_enabled: Optional[bool] = None
    setup_required: Optional[bool] = None
    force_ssl: Optional[bool] = None
    tax_shipping: Optional[bool] = None
    taxes_included: Optional[bool] = None
    county_taxes: Optional[bool] = None
    primary_location_id: Any = None
    money_in_emails_format: Any = None
    money_with_currency_in_emails_format: Any = None
    eligible_for_payments: Any = None
    requires_extra_payments_agreement: Any = None
    finances: Any = None


def get_shop(session: ShopifySession) -> Shop:
    return request(session, "GET", session.api_path("shop.json"), "shop", Shop)
