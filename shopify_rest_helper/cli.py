"""Command line interface.

Credentials come from ``SHOPIFY_BASE_URL``, ``SHOPIFY_API_KEY`` and
``SHOPIFY_PASSWORD`` (environment or the ``--config`` env file). Every command
prints JSON on stdout.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from .config import ShopifySettings
from .errors import ShopifyError, optional
from .paginate import PageCursor, Paginated, iter_pages
from .resources import fulfillment_orders, inventory, orders, products, shop, variants
from .retry import call_with_retry
from .session import ShopifySession
from .transport import Transport

app = typer.Typer(add_completion=False, help="Shopify REST Admin API helper.")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


class _State:
    config: Path = Path(".env")
    log_level: Optional[str] = None
    settings: Optional[ShopifySettings] = None
    session: Optional[ShopifySession] = None
    # Overridden in tests; None selects the default RequestsTransport.
    transport: Optional[Transport] = None


state = _State()


def _to_json(value: Any) -> Any:
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return value


def _print(value: Any) -> None:
    console.print_json(json.dumps(_to_json(value)))


def _call(func: Callable[..., Any], *args, **kwargs) -> Any:
    settings = state.settings
    retries = settings.retries if settings is not None else 0
    try:
        return call_with_retry(func, *args, retries=retries, **kwargs)
    except ShopifyError as exc:
        err_console.print(f"[red]error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _collect(
    fetch_first: Callable[[], Paginated[list]],
    fetch_page: Callable[[PageCursor], Paginated[list]],
    limit: Optional[int],
) -> list:
    pages: Iterable[Paginated[list]] = iter_pages(
        lambda: _call(fetch_first),
        lambda cursor: _call(fetch_page, cursor),
        limit=limit,
    )
    items = []
    for count, page in enumerate(pages, start=1):
        logger.info("page %d: %d items", count, len(page.payload))
        items.extend(page.payload)
    return items


def _get_or_exit(func: Callable[..., Any], *args) -> Any:
    value = _call(optional, func, *args)
    if value is None:
        err_console.print("[red]not found[/red]")
        raise typer.Exit(code=1)
    return value


def _session() -> ShopifySession:
    """Load settings and build the session on first use."""
    if state.session is not None:
        return state.session
    try:
        settings = ShopifySettings.from_env_file(state.config)
    except ValidationError as exc:
        err_console.print(f"[red]invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    logging.basicConfig(
        level=(state.log_level or settings.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    state.settings = settings
    try:
        state.session = settings.session(state.transport)
    except ShopifyError as exc:
        err_console.print(f"[red]invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    return state.session


@app.callback()
def main(
    config: Path = typer.Option(Path(".env"), "--config", "-c", help="Env file with SHOPIFY_* settings."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: SHOPIFY_LOG_LEVEL or WARNING)."),
) -> None:
    state.config = config
    state.log_level = log_level
    state.settings = None
    state.session = None



@app.command("shop")
def shop_get() -> None:
    """Show the shop's settings."""
    _print(_call(shop.get_shop, _session()))


@app.command("product-list")
def product_list(limit: Optional[int] = typer.Option(None, help="Page size (max 250).")) -> None:
    """List every product."""
    session = _session()
    params = products.GetProductListParams(limit=limit)
    _print(
        _collect(
            lambda: products.list_products(session, params),
            lambda cursor: products.list_products_page(session, cursor),
            limit,
        )
    )


@app.command("product-get")
def product_get(id: int) -> None:
    _print(_get_or_exit(products.get_product, _session(), id))


@app.command("variant-list")
def variant_list(limit: Optional[int] = typer.Option(None, help="Page size (max 250).")) -> None:
    """List every product variant."""
    session = _session()
    params = variants.GetVariantListParams(limit=limit)
    _print(
        _collect(
            lambda: variants.list_variants(session, params),
            lambda cursor: variants.list_variants_page(session, cursor),
            limit,
        )
    )


@app.command("order-list")
def order_list(
    status: str = typer.Option("any", help="open, closed, cancelled or any."),
    limit: Optional[int] = typer.Option(None, help="Page size (max 250)."),
) -> None:
    """List orders."""
    session = _session()
    params = orders.GetOrderListParams(status=status, limit=limit)
    _print(
        _collect(
            lambda: orders.list_orders(session, params),
            lambda cursor: orders.list_orders_page(session, cursor),
            limit,
        )
    )


@app.command("order-get")
def order_get(id: int) -> None:
    _print(_get_or_exit(orders.get_order, _session(), id))


@app.command("location-list")
def location_list() -> None:
    _print(_call(inventory.list_locations, _session()))


@app.command("inventory-levels")
def inventory_levels(
    location_id: List[int] = typer.Option([], "--location-id", help="Repeat for several locations."),
    item_id: List[int] = typer.Option([], "--item-id", help="Repeat for several inventory items."),
    limit: Optional[int] = typer.Option(None, help="Page size (max 250)."),
) -> None:
    """List inventory levels for locations and/or inventory items."""
    if not location_id and not item_id:
        err_console.print("[red]error:[/red] pass --location-id or --item-id")
        raise typer.Exit(code=2)
    session = _session()
    params = inventory.GetInventoryLevelsParams(
        inventory_item_ids=item_id or None,
        location_ids=location_id or None,
        limit=limit,
    )
    _print(
        _collect(
            lambda: inventory.list_inventory_levels(session, params),
            lambda cursor: inventory.list_inventory_levels_page(session, cursor),
            limit,
        )
    )


@app.command("fulfillment-orders")
def fulfillment_order_list(order_id: int) -> None:
    """List the fulfillment orders of an order."""
    _print(_call(fulfillment_orders.list_fulfillment_orders, _session(), order_id))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
