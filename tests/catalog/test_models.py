"""Tests for catalog models."""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from catalog_api.catalog.models import Category, Product, Variant


def make_product(**overrides) -> Product:
    """Create a valid test product."""
    data = {"name": "Desk Lamp", "price": 45, "category": "Home"}
    data.update(overrides)
    return Product.model_validate(data)


class TestVariant:
    """Tests for Variant."""

    def test_generates_object_id(self):
        variant = Variant(color="Red", size="M", stock=1)

        assert ObjectId.is_valid(variant.id)

    def test_ids_are_unique(self):
        first = Variant(color="Red", size="M", stock=1)
        second = Variant(color="Red", size="M", stock=1)

        assert first.id != second.id

    def test_accepts_document_id_key(self):
        variant = Variant.model_validate(
            {"_id": "686f68ed2bf5384209b236b0", "color": "Red", "size": "M", "stock": 10}
        )

        assert variant.id == "686f68ed2bf5384209b236b0"

    def test_zero_stock_allowed(self):
        assert Variant(color="Red", size="M", stock=0).stock == 0

    @pytest.mark.parametrize(
        "data",
        [
            {"color": "Red", "size": "M", "stock": -1},
            {"color": "", "size": "M", "stock": 1},
            {"color": "Red", "size": "", "stock": 1},
            {"color": "Red", "size": "M"},
            {"id": "not-an-id", "color": "Red", "size": "M", "stock": 1},
            {"_id": "686f68ed2bf5384209b236", "color": "Red", "size": "M", "stock": 1},
        ],
    )
    def test_invalid_variant(self, data):
        with pytest.raises(ValidationError):
            Variant.model_validate(data)


class TestProduct:
    """Tests for Product."""

    def test_defaults(self):
        product = make_product()

        assert product.id is None
        assert product.variants == []
        assert product.created_at is None
        assert product.category is Category.HOME

    def test_minimum_price_allowed(self):
        assert make_product(price=1).price == 1

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "A"},
            {"price": 0.99},
            {"category": "Toys"},
            {"category": "electronics"},
        ],
    )
    def test_invalid_product(self, overrides):
        with pytest.raises(ValidationError):
            make_product(**overrides)

    def test_has_color_ignores_case(self):
        product = make_product(variants=[{"color": "Blue", "size": "L", "stock": 5}])

        assert product.has_color("blue")
        assert product.has_color("BLUE")
        assert not product.has_color("Red")

    def test_category_values(self):
        assert [c.value for c in Category] == [
            "Electronics",
            "Clothing",
            "Footwear",
            "Apparel",
            "Accessories",
            "Home",
        ]
