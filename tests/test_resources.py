import pathlib
import sys
from datetime import datetime, timezone

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from shopify_rest_helper.errors import NotFoundError, optional
from shopify_rest_helper.resources.fulfillment_orders import (
    FulfillmentOrderStatus,
    MoveFulfillmentOrderRequest,
    MoveLineItem,
    list_fulfillment_orders,
    move_fulfillment_order,
)
from shopify_rest_helper.resources.fulfillment_services import (
    FulfillmentServiceScope,
    NewFulfillmentService,
    UpdateFulfillmentService,
    create_fulfillment_service,
    delete_fulfillment_service,
    list_fulfillment_services,
    update_fulfillment_service,
)
from shopify_rest_helper.resources.fulfillments import (
    FulfillmentBuilder,
    cancel_fulfillment,
    create_fulfillment,
)
from shopify_rest_helper.resources.inventory import (
    GetInventoryLevelsParams,
    get_location,
    iter_inventory_levels,
)
from shopify_rest_helper.resources.orders import (
    FinancialStatus,
    OrderUpdate,
    ShipmentStatus,
    get_order,
    list_order_risks,
    update_order,
)
from shopify_rest_helper.resources.products import update_product
from shopify_rest_helper.resources.shop import get_shop
from shopify_rest_helper.resources.variants import get_variant
from fakes import DummyResponse, ListTransport, load_fixture, make_session, page_response

API = "https://test.myshopify.com/admin/api/2025-01"


def test_get_shop():
    transport = ListTransport([DummyResponse(200, load_fixture("shop.json"))])
    shop = get_shop(make_session(transport))
    assert shop.name == "111 Canada"
    assert shop.primary_location_id == 11111111
    assert shop.created_at.year == 2015
    assert transport.calls[0].url == f"{API}/shop.json"


def test_get_order_decodes_nested_schema():
    transport = ListTransport([DummyResponse(200, load_fixture("order.json"))])
    order = get_order(make_session(transport), 450789469)
    assert transport.calls[0].url == f"{API}/orders/450789469.json"
    assert order.financial_status is FinancialStatus.PARTIALLY_REFUNDED
    assert order.fulfillment_status is None
    assert order.line_items[0].properties[0].value == "Happy Birthday"
    assert order.fulfillments[0].shipment_status is ShipmentStatus.IN_TRANSIT
    # untyped JSON fields keep their raw shape
    assert order.fulfillments[0].receipt == {"testcase": True, "authorization": "123456"}
    assert order.checkout_id == 901414060


def test_optional_get_order_not_found():
    transport = ListTransport([DummyResponse(404, None, text='{"errors":"Not Found"}')])
    assert optional(get_order, make_session(transport), 1) is None


def test_update_order_wraps_body():
    transport = ListTransport([DummyResponse(200, load_fixture("order.json"))])
    update_order(make_session(transport), 450789469, OrderUpdate(note="call first"))
    req = transport.calls[0]
    assert req.method == "PUT"
    assert req.json == {"order": {"id": 450789469, "note": "call first"}}


def test_list_order_risks():
    transport = ListTransport(
        [DummyResponse(200, {"risks": [{"id": 1, "recommendation": "cancel", "score": "1.0"}]})]
    )
    risks = list_order_risks(make_session(transport), 5)
    assert risks[0].recommendation == "cancel"
    assert transport.calls[0].url == f"{API}/orders/5/risks.json"


def test_update_product_sends_partial_body():
    transport = ListTransport([DummyResponse(200, {"product": {"id": 1, "title": "New"}})])
    product = update_product(make_session(transport), 1, {"title": "New"})
    assert product.title == "New"
    assert transport.calls[0].json == {"product": {"title": "New"}}


def test_get_variant_missing_raises():
    transport = ListTransport([DummyResponse(404, None)])
    with pytest.raises(NotFoundError):
        get_variant(make_session(transport), 9)


def test_fulfillment_builder():
    fulfillment = (
        FulfillmentBuilder()
        .add_item(1, 2)
        .add_item(3)
        .add_item(1, 5)
        .tracking_number("1Z30434EDG37750543")
        .notify_customer(True)
        .build()
    )
    assert [(item.id, item.quantity) for item in fulfillment.line_items] == [(1, 5), (3, None)]
    assert fulfillment.tracking_number == "1Z30434EDG37750543"
    assert fulfillment.tracking_numbers == ("1Z30434EDG37750543",)
    with pytest.raises(Exception):
        fulfillment.tracking_url = "https://example.com"


def test_fulfillment_builder_tracking_numbers_clears_single():
    fulfillment = FulfillmentBuilder().tracking_number("a").tracking_numbers(["b", "c"]).build()
    assert fulfillment.tracking_number is None
    assert fulfillment.tracking_numbers == ("b", "c")


def test_create_fulfillment_posts_wrapped_body():
    transport = ListTransport([DummyResponse(201, {"fulfillment": {"id": 9, "order_id": 7}})])
    fulfillment = FulfillmentBuilder().location_id(4).add_item(11, 1).tracking_number("T1").build()
    created = create_fulfillment(make_session(transport), 7, fulfillment)
    assert created.id == 9
    req = transport.calls[0]
    assert req.method == "POST"
    assert req.url == f"{API}/orders/7/fulfillments.json"
    assert req.json == {
        "fulfillment": {
            "location_id": 4,
            "tracking_number": "T1",
            "tracking_numbers": ["T1"],
            "line_items": [{"id": 11, "quantity": 1}],
        }
    }


def test_cancel_fulfillment_path():
    transport = ListTransport([DummyResponse(200, {"fulfillment": {"id": 9, "status": "cancelled"}})])
    cancelled = cancel_fulfillment(make_session(transport), 7, 9)
    assert cancelled.status == "cancelled"
    assert transport.calls[0].url == f"{API}/orders/7/fulfillments/9/cancel.json"
    assert transport.calls[0].json is None


def test_list_fulfillment_services_scope_param():
    transport = ListTransport(
        [DummyResponse(200, {"fulfillment_services": [{"id": 1, "name": "S2", "location_id": 3}]})]
    )
    services = list_fulfillment_services(make_session(transport), FulfillmentServiceScope.ALL)
    assert services[0].name == "S2"
    assert transport.calls[0].params == [("scope", "all")]


def test_list_fulfillment_services_without_scope():
    transport = ListTransport([DummyResponse(200, {"fulfillment_services": []})])
    assert list_fulfillment_services(make_session(transport)) == []
    assert transport.calls[0].params == []


def test_create_and_update_fulfillment_service():
    body = {"fulfillment_service": {"id": 5, "name": "S2"}}
    transport = ListTransport([DummyResponse(201, body), DummyResponse(200, body)])
    session = make_session(transport)
    create_fulfillment_service(
        session,
        NewFulfillmentService(
            name="S2",
            callback_url="https://example.com/cb",
            inventory_management=True,
            tracking_support=True,
            requires_shipping_method=True,
        ),
    )
    update_fulfillment_service(session, 5, UpdateFulfillmentService(name="Renamed"))
    assert transport.calls[0].json["fulfillment_service"]["format"] == "json"
    assert transport.calls[1].json == {"fulfillment_service": {"name": "Renamed"}}
    assert transport.calls[1].url == f"{API}/fulfillment_services/5.json"


def test_delete_fulfillment_service_optional():
    transport = ListTransport([DummyResponse(200, {}), DummyResponse(404, None)])
    session = make_session(transport)
    assert delete_fulfillment_service(session, 5) is None
    assert optional(delete_fulfillment_service, session, 5) is None
    assert [req.method for req in transport.calls] == ["DELETE", "DELETE"]


def test_fulfillment_orders():
    fulfillment_order = {
        "id": 1046000778,
        "order_id": 450789469,
        "status": "open",
        "assigned_location_id": 24826418,
        "line_items": [{"id": 1, "line_item_id": 466157049, "quantity": 1}],
    }
    moved = dict(fulfillment_order, id=1046000779, assigned_location_id=655441491)
    transport = ListTransport(
        [
            DummyResponse(200, {"fulfillment_orders": [fulfillment_order]}),
            DummyResponse(
                200,
                {
                    "original_fulfillment_order": dict(fulfillment_order, status="closed"),
                    "moved_fulfillment_order": moved,
                    "remaining_fulfillment_order": None,
                },
            ),
        ]
    )
    session = make_session(transport)
    orders = list_fulfillment_orders(session, 450789469)
    assert orders[0].status is FulfillmentOrderStatus.OPEN
    result = move_fulfillment_order(
        session,
        1046000778,
        MoveFulfillmentOrderRequest(
            new_location_id=655441491,
            fulfillment_order_line_items=[MoveLineItem(id=1, quantity=1)],
        ),
    )
    assert result.original_fulfillment_order.status is FulfillmentOrderStatus.CLOSED
    assert result.moved_fulfillment_order.assigned_location_id == 655441491
    assert transport.calls[1].json == {
        "fulfillment_order": {
            "new_location_id": 655441491,
            "fulfillment_order_line_items": [{"id": 1, "quantity": 1}],
        }
    }


def test_get_location():
    transport = ListTransport([DummyResponse(200, {"location": {"id": 3, "name": "Warehouse"}})])
    assert get_location(make_session(transport), 3).name == "Warehouse"


def test_iter_inventory_levels():
    link = f'<{API}/inventory_levels.json?page_info=inv2>; rel="next"'
    level = {"inventory_item_id": 1, "location_id": 3, "available": 7}
    transport = ListTransport(
        [
            page_response({"inventory_levels": [level]}, link),
            page_response({"inventory_levels": [dict(level, inventory_item_id=2, available=None)]}),
        ]
    )
    params = GetInventoryLevelsParams(
        location_ids=[3],
        updated_at_min=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    levels = list(iter_inventory_levels(make_session(transport), params))
    assert [(lv.inventory_item_id, lv.available) for lv in levels] == [(1, 7), (2, None)]
    assert transport.calls[0].params == [
        ("location_ids", "3"),
        ("updated_at_min", "2024-01-01T00:00:00+00:00"),
    ]
    assert transport.calls[1].params == [("page_info", "inv2")]
