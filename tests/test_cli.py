import json
import pathlib
import sys

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from shopify_rest_helper import cli
from shopify_rest_helper.config import ShopifySettings
from fakes import DummyResponse, ListTransport, load_fixture, page_response

runner = CliRunner()

API = "https://test.myshopify.com/admin/api/2025-01"


@pytest.fixture
def env_file(tmp_path, monkeypatch):
    for name in ("SHOPIFY_BASE_URL", "SHOPIFY_API_KEY", "SHOPIFY_PASSWORD", "SHOPIFY_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "test.env"
    path.write_text(
        "SHOPIFY_BASE_URL=https://test.myshopify.com\n"
        "SHOPIFY_API_KEY=key\n"
        "SHOPIFY_PASSWORD=secret\n"
        "SHOPIFY_RETRIES=0\n"
    )
    return path


@pytest.fixture
def use_transport(monkeypatch):
    def install(responses):
        transport = ListTransport(responses)
        monkeypatch.setattr(cli.state, "transport", transport)
        return transport

    return install


def test_settings_from_env_file(env_file):
    settings = ShopifySettings.from_env_file(env_file)
    assert settings.base_url == "https://test.myshopify.com"
    assert settings.password.get_secret_value() == "secret"
    assert "secret" not in repr(settings)
    session = settings.session(ListTransport([]))
    assert session.api_key == "key"
    assert session.timeout == 30


def test_shop_command(env_file, use_transport):
    use_transport([DummyResponse(200, load_fixture("shop.json"))])
    result = runner.invoke(cli.app, ["--config", str(env_file), "shop"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["name"] == "111 Canada"


def test_product_list_follows_cursors(env_file, use_transport):
    transport = use_transport(
        [
            page_response(
                load_fixture("products_page1.json"),
                f'<{API}/products.json?limit=2&page_info=next1>; rel="next"',
            ),
            page_response(load_fixture("products_page2.json")),
        ]
    )
    result = runner.invoke(cli.app, ["--config", str(env_file), "product-list", "--limit", "2"])
    assert result.exit_code == 0, result.output
    assert [p["id"] for p in json.loads(result.stdout)] == [1, 2, 3]
    assert transport.calls[1].params == [("page_info", "next1"), ("limit", "2")]


def test_order_get_not_found(env_file, use_transport):
    use_transport([DummyResponse(404, None)])
    result = runner.invoke(cli.app, ["--config", str(env_file), "order-get", "42"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_order_get(env_file, use_transport):
    transport = use_transport([DummyResponse(200, load_fixture("order.json"))])
    result = runner.invoke(cli.app, ["--config", str(env_file), "order-get", "450789469"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["name"] == "#1001"
    assert transport.calls[0].url == f"{API}/orders/450789469.json"


def test_request_failure_exits_nonzero(env_file, use_transport):
    use_transport([DummyResponse(401, None, text="Invalid API key or access token")])
    result = runner.invoke(cli.app, ["--config", str(env_file), "location-list"])
    assert result.exit_code == 1
    assert "HTTP 401" in result.output


def test_inventory_levels_requires_filter(env_file, use_transport):
    use_transport([])
    result = runner.invoke(cli.app, ["--config", str(env_file), "inventory-levels"])
    assert result.exit_code == 2


def test_missing_configuration(tmp_path, monkeypatch):
    for name in ("SHOPIFY_BASE_URL", "SHOPIFY_API_KEY", "SHOPIFY_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    empty = tmp_path / "empty.env"
    empty.write_text("")
    result = runner.invoke(cli.app, ["--config", str(empty), "shop"])
    assert result.exit_code == 2


def test_help_without_configuration(tmp_path, monkeypatch):
    for name in ("SHOPIFY_BASE_URL", "SHOPIFY_API_KEY", "SHOPIFY_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    empty = tmp_path / "empty.env"
    empty.write_text("")
    result = runner.invoke(cli.app, ["--config", str(empty), "order-list", "--help"])
    assert result.exit_code == 0, result.output
    assert "--status" in result.output
