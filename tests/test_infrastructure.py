"""
Catalog and session store tests
"""
import json
import math

import httpx
import pytest

from shopbot.core.models.chat import ConversationContext
from shopbot.core.models.intent import ChatIntent
from shopbot.core.protocols.catalog import ProductCatalogProtocol
from shopbot.core.protocols.store import ConversationStoreProtocol
from shopbot.infrastructure.catalogs.http_catalog import HttpProductCatalog
from shopbot.infrastructure.catalogs.json_catalog import JsonProductCatalog
from shopbot.infrastructure.stores.json_store import JsonConversationStore

RECORDS = [
    {"id": "p1", "productName": "Shirt", "productPrice": 10, "stock": 5, "category": "Clothing"},
    {"id": "p2", "productName": "Mouse", "productPrice": "25.5", "stock": 0},
]


# JSON catalog

@pytest.mark.parametrize("payload", [RECORDS, {"products": RECORDS}])
def test_json_catalog_reads_both_layouts(tmp_path, payload):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    catalog = JsonProductCatalog(str(path))

    products = catalog.list_products()

    assert [p.name for p in products] == ["Shirt", "Mouse"]
    assert products[1].price == 25.5
    assert products[1].category == "General"
    assert isinstance(catalog, ProductCatalogProtocol)


def test_json_catalog_get_product(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    catalog = JsonProductCatalog(str(path))

    assert catalog.get_product("p2").name == "Mouse"
    assert catalog.get_product("p9") is None


def test_json_catalog_missing_file(tmp_path):
    assert JsonProductCatalog(str(tmp_path / "none.json")).list_products() == []


def test_json_catalog_corrupt_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("[{", encoding="utf-8")
    assert JsonProductCatalog(str(path)).list_products() == []


# HTTP catalog

def _http_catalog(handler):
    return HttpProductCatalog("https://shop.test/api/", transport=httpx.MockTransport(handler))


def test_http_catalog_lists_products():
    def handler(request):
        assert request.url.path == "/api/products"
        return httpx.Response(200, json={"products": RECORDS})

    products = _http_catalog(handler).list_products()

    assert [p.id for p in products] == ["p1", "p2"]


def test_http_catalog_get_product():
    def handler(request):
        if request.url.path == "/api/products/p1":
            return httpx.Response(200, json={"productName": "Shirt", "productPrice": 10})
        return httpx.Response(404)

    catalog = _http_catalog(handler)

    product = catalog.get_product("p1")
    assert product.id == "p1"
    assert product.name == "Shirt"
    assert catalog.get_product("p404") is None


def test_http_catalog_server_error():
    catalog = _http_catalog(lambda request: httpx.Response(500))

    assert catalog.list_products() == []
    assert catalog.get_product("p1") is None


def test_http_catalog_invalid_body():
    catalog = _http_catalog(lambda request: httpx.Response(200, text="<html>"))
    assert catalog.list_products() == []


# Session store

def test_store_round_trip(tmp_path):
    store = JsonConversationStore(str(tmp_path / "sessions"))
    context = ConversationContext()
    context.add_user_message("show me shirt")
    context.add_bot_message("I found **Shirt**")
    context.set_last_intent(ChatIntent.PRODUCT_SEARCH, product_id="p1")
    context.set_metadata("priceRangeMin", 100.0)
    context.set_metadata("priceRangeMax", math.inf)

    store.save("user/42", context)
    restored = store.load("user/42")

    assert isinstance(store, ConversationStoreProtocol)
    assert restored.to_list() == context.to_list()
    assert restored.last_intent == ChatIntent.PRODUCT_SEARCH
    assert restored.last_product_id == "p1"
    assert math.isinf(restored.get_metadata("priceRangeMax"))
    assert list((tmp_path / "sessions").iterdir())[0].name == "user_42.json"


def test_store_applies_history_bound(tmp_path):
    context = ConversationContext()
    for i in range(6):
        context.add_user_message(str(i))
    JsonConversationStore(str(tmp_path)).save("s", context)

    restored = JsonConversationStore(str(tmp_path), max_history_length=3).load("s")

    assert [m.text for m in restored.history] == ["3", "4", "5"]


def test_store_missing_session(tmp_path):
    assert JsonConversationStore(str(tmp_path)).load("nobody") is None


def test_store_corrupt_session(tmp_path):
    (tmp_path / "bad.json").write_text("{oops", encoding="utf-8")
    assert JsonConversationStore(str(tmp_path)).load("bad") is None


def test_store_delete(tmp_path):
    store = JsonConversationStore(str(tmp_path))
    store.save("s", ConversationContext())

    store.delete("s")
    store.delete("s")

    assert store.load("s") is None


@pytest.mark.parametrize("content", [
    "[]",
    '{"history": ["hi"]}',
    '{"history": [{"sender": "user"}]}',
    '{"sessionMetadata": 5}',
])
def test_store_malformed_session(tmp_path, content):
    (tmp_path / "odd.json").write_text(content, encoding="utf-8")
    assert JsonConversationStore(str(tmp_path)).load("odd") is None
