"""
Parameter extraction tests
"""
import math

import pytest

from shopbot.core.handlers.extractors import extract_category, extract_price_range, extract_product
from shopbot.core.models.product import PriceRange, Product


def test_extract_category(products):
    assert extract_category("Show me CLOTHING please", products) == "Clothing"
    assert extract_category("anything in food?", products) == "Food"


def test_extract_category_first_in_catalog_order(products):
    assert extract_category("electronics or clothing", products) == "Clothing"


def test_extract_category_missing(products):
    assert extract_category("show me toys", products) is None
    assert extract_category("clothing", []) is None


@pytest.mark.parametrize(
    "query,expected",
    [
        ("under 50", PriceRange(0.0, 50.0)),
        ("Below €30", PriceRange(0.0, 30.0)),
        ("cheaper than 25 euros", PriceRange(0.0, 25.0)),
        ("unter 40 euro", PriceRange(0.0, 40.0)),
        ("over 100 euros", PriceRange(100.0, math.inf)),
        ("more than 15", PriceRange(15.0, math.inf)),
        ("between 20 and 100 euros", PriceRange(20.0, 100.0)),
        ("from 10 to 50", PriceRange(10.0, 50.0)),
        ("between 20 euros and 80 euros", PriceRange(20.0, 80.0)),
        ("10 - 50", PriceRange(10.0, 50.0)),
        ("€5 to €15", PriceRange(5.0, 15.0)),
    ],
)
def test_extract_price_range(query, expected):
    assert extract_price_range(query) == expected


def test_extract_price_range_swaps_reversed_bounds():
    assert extract_price_range("between 100 and 20") == PriceRange(20.0, 100.0)


@pytest.mark.parametrize("query", ["", "show me something nice", "under the bed", "price range"])
def test_extract_price_range_no_match(query):
    assert extract_price_range(query) is None


def test_unbounded_range():
    price_range = extract_price_range("above 10")
    assert not price_range.is_bounded
    assert price_range.contains(10.0)
    assert price_range.contains(1_000_000.0)
    assert not price_range.contains(9.99)


def test_extract_product_by_full_name(products):
    assert extract_product("How much is the LAPTOP?", products).id == "3"
    assert extract_product("price of shirts", products).id == "1"


def test_extract_product_by_name_word():
    products = [
        Product(id="t", name="T-Shirt", description="", price=5.0, stock=1),
        Product(id="b", name="Teddy-Bear", description="", price=9.0, stock=1),
    ]
    assert extract_product("do you have a shirt", products).id == "t"
    assert extract_product("is the teddy in stock", products).id == "b"


def test_extract_product_ignores_common_words(products):
    assert extract_product("how much is it", products) is None
    assert extract_product("what is the price", products) is None


def test_extract_product_no_match(products):
    assert extract_product("do you sell bicycles", products) is None
    assert extract_product("laptop", []) is None
