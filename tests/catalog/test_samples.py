"""Tests for the sample catalog."""

from catalog_api.catalog.samples import SAMPLE_PRODUCTS, SampleCatalog


class TestSampleCatalog:
    """Tests for SampleCatalog."""

    def test_contents(self):
        catalog = SampleCatalog()

        assert len(catalog) == 4
        assert [(p.name, p.price, p.category.value) for p in catalog.all()] == [
            ("Smartphone", 699, "Electronics"),
            ("Running Shoes", 120, "Footwear"),
            ("Winter Jacket", 260, "Apparel"),
            ("Gaming Laptop", 1299, "Electronics"),
        ]

    def test_ids_are_stable(self):
        assert [p.id for p in SampleCatalog().all()] == [p.id for p in SAMPLE_PRODUCTS]
        assert SAMPLE_PRODUCTS[0].id == "686f63eb90ac2728b3f11082"

    def test_all_returns_copies(self):
        catalog = SampleCatalog()

        first = catalog.all()
        first[1].variants.clear()
        first[0].name = "Changed"

        second = catalog.all()
        assert second[0].name == "Smartphone"
        assert len(second[1].variants) == 2

    def test_by_category_ignores_case(self):
        catalog = SampleCatalog()

        names = [p.name for p in catalog.by_category("ELECTRONICS")]

        assert names == ["Smartphone", "Gaming Laptop"]
        assert catalog.by_category("Toys") == []

    def test_by_color_ignores_case(self):
        catalog = SampleCatalog()

        assert [p.name for p in catalog.by_color("black")] == [
            "Winter Jacket",
            "Gaming Laptop",
        ]
        assert [p.name for p in catalog.by_color("Blue")] == ["Running Shoes"]
        assert catalog.by_color("Purple") == []
