# tests/test_client.py
import asyncio
import logging

import httpx

from catalog_sdk.client import DEFAULT_DESCRIPTION, PLACEHOLDER_IMAGE, CatalogClient
from catalog_sdk.models import Product
from catalog_sdk.results import Failure, Success


def _failing_client(exc_type):
    def handler(request):
        raise exc_type("boom", request=request)
    return CatalogClient(base_url="http://fakestore.test", transport=httpx.MockTransport(handler))


def test_list_products(client, store):
    result = asyncio.run(client.list_products())
    assert isinstance(result, Success)
    assert [p.id for p in result.value] == [1, 7, 15]
    assert isinstance(result.value[0], Product)
    assert store.CALLS == ["GET /products"]


def test_empty_list_is_success_not_failure(client, store):
    store.reset([])
    result = asyncio.run(client.list_products())
    assert isinstance(result, Success)
    assert result.value == []


def test_get_product(client, store):
    result = asyncio.run(client.get_product("15"))
    assert isinstance(result, Success)
    assert result.value.title == "BIYLACLESEN Snowboard Jacket"
    assert result.value.description is None
    assert store.CALLS == ["GET /products/15"]


def test_get_unknown_product_is_failure(client, caplog):
    with caplog.at_level(logging.ERROR, logger="catalog_sdk"):
        result = asyncio.run(client.get_product(999))
    assert isinstance(result, Failure)
    assert result.reason == "product not found"
    assert "fetching product 999" in caplog.text


def test_create_product_sends_json_payload(client, store):
    result = asyncio.run(client.create_product("T-Shirt Rex", "300", "remeras"))
    assert isinstance(result, Success)
    assert result.value.id == 16
    assert result.value.price == 300.0

    submitted = store.SUBMITTED[0]
    assert submitted["content_type"] == "application/json"
    assert submitted["body"] == {
        "title": "T-Shirt Rex",
        "price": 300.0,
        "description": DEFAULT_DESCRIPTION,
        "image": PLACEHOLDER_IMAGE,
        "category": "remeras",
    }


def test_create_product_with_bad_price_never_sends(client, store):
    result = asyncio.run(client.create_product("Hat", "-1", "misc", "a hat"))
    assert isinstance(result, Failure)
    assert "price" in result.reason
    assert store.CALLS == []


def test_delete_product_returns_server_payload(client, store):
    result = asyncio.run(client.delete_product("7"))
    assert isinstance(result, Success)
    assert result.value["id"] == 7
    assert store.CALLS == ["DELETE /products/7"]


def test_delete_with_null_body_is_success(client):
    result = asyncio.run(client.delete_product(404))
    assert isinstance(result, Success)
    assert result.value is None


def test_non_2xx_status_is_failure(client, store, caplog):
    store.FORCED_STATUS["status"] = 503
    with caplog.at_level(logging.ERROR, logger="catalog_sdk"):
        results = [
            asyncio.run(client.list_products()),
            asyncio.run(client.get_product(1)),
            asyncio.run(client.create_product("Hat", 5, "misc")),
            asyncio.run(client.delete_product(1)),
        ]
    assert all(isinstance(r, Failure) for r in results)
    assert {r.status_code for r in results} == {503}
    assert "Error fetching products: HTTP 503" in caplog.text
    assert "Error deleting product 1: HTTP 503" in caplog.text


def test_transport_errors_do_not_raise():
    result = asyncio.run(_failing_client(httpx.ConnectError).list_products())
    assert isinstance(result, Failure)
    assert result.status_code is None
    assert result.reason == "boom"


def test_timeout_is_reported_like_any_failure():
    result = asyncio.run(_failing_client(httpx.ReadTimeout).get_product(1))
    assert isinstance(result, Failure)
    assert str(result) == "Error fetching product 1: boom"


def test_invalid_json_is_failure():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))
    client = CatalogClient(base_url="http://fakestore.test", transport=transport)
    result = asyncio.run(client.list_products())
    assert isinstance(result, Failure)
    assert result.reason == "response body is not valid JSON"


def test_unexpected_payload_shape_is_failure():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"message": "hi"}))
    client = CatalogClient(base_url="http://fakestore.test", transport=transport)
    result = asyncio.run(client.list_products())
    assert isinstance(result, Failure)
    assert result.reason == "unexpected response payload"
