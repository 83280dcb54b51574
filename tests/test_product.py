"""
Product model tests
"""
import math

from shopbot.core.models.product import PriceRange, Product


def test_from_map_storefront_schema():
    product = Product.from_map(
        {
            "productName": "Laptop",
            "productDescription": "Fast",
            "productPrice": 999.5,
            "stock": 3,
            "category": "Electronics",
            "imageUrl": "https://img.example/laptop.png",
        },
        product_id="doc-1",
    )

    assert product.id == "doc-1"
    assert product.name == "Laptop"
    assert product.description == "Fast"
    assert product.price == 999.5
    assert product.stock == 3
    assert product.category == "Electronics"
    assert product.image_url == "https://img.example/laptop.png"
    assert product.in_stock


def test_from_map_plain_keys():
    product = Product.from_map({"id": 7, "name": "Mouse", "description": "Wireless", "price": 25})

    assert product.id == "7"
    assert product.name == "Mouse"
    assert product.price == 25.0
    assert product.category == "General"
    assert product.stock == 0
    assert not product.in_stock


def test_from_map_string_numbers():
    product = Product.from_map({"productPrice": "12.5", "stock": "4"})
    assert product.price == 12.5
    assert product.stock == 4


def test_from_map_bad_values():
    product = Product.from_map({"productPrice": "free", "stock": None, "category": ""})

    assert product.price == 0.0
    assert product.stock == 0
    assert product.category == "General"
    assert product.name == ""
    assert product.id == ""


def test_from_map_clamps_negatives():
    product = Product.from_map({"productPrice": -5, "stock": -2})
    assert product.price == 0.0
    assert product.stock == 0


def test_price_range_defaults_unbounded():
    price_range = PriceRange(min_price=10.0)

    assert not price_range.is_bounded
    assert price_range.max_price == math.inf
    assert price_range.contains(10.0)
    assert price_range.contains(1e9)
    assert not price_range.contains(9.99)


def test_price_range_inclusive():
    price_range = PriceRange(20.0, 50.0)
    assert price_range.is_bounded
    assert price_range.contains(20.0)
    assert price_range.contains(50.0)
    assert not price_range.contains(50.01)


def test_from_map_text_fields_become_strings():
    product = Product.from_map({"productName": 123, "productDescription": 4.5, "category": 7})

    assert product.name == "123"
    assert product.description == "4.5"
    assert product.category == "7"


def test_numeric_name_still_answers(chatbot):
    laptop = Product.from_map({"id": "p1", "productName": 123, "productPrice": 10, "stock": 1})

    assert chatbot.respond("how much is the 123", [laptop]) == "The 123 costs €10.00."
