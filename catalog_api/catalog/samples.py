"""Static sample catalog.

Served in place of live data when the product store is unavailable,
and used to seed an empty store.
"""

from catalog_api.catalog.models import Category, Product, Variant

SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="686f63eb90ac2728b3f11082",
        name="Smartphone",
        price=699,
        category=Category.ELECTRONICS,
        variants=[],
    ),
    Product(
        id="686f68ed2bf5384209b236af",
        name="Running Shoes",
        price=120,
        category=Category.FOOTWEAR,
        variants=[
            Variant(id="686f68ed2bf5384209b236b0", color="Red", size="M", stock=10),
            Variant(id="686f68ed2bf5384209b236b1", color="Blue", size="L", stock=5),
        ],
    ),
    Product(
        id="686f68ed2bf5384209b236b2",
        name="Winter Jacket",
        price=260,
        category=Category.APPAREL,
        variants=[
            Variant(id="686f68ed2bf5384209b236b3", color="Black", size="S", stock=8),
            Variant(id="686f68ed2bf5384209b236b4", color="Gray", size="M", stock=12),
        ],
    ),
    Product(
        id="686f68ed2bf5384209b236b5",
        name="Gaming Laptop",
        price=1299,
        category=Category.ELECTRONICS,
        variants=[
            Variant(id="686f68ed2bf5384209b236b6", color="Black", size="15-inch", stock=3),
            Variant(id="686f68ed2bf5384209b236b7", color="Silver", size="17-inch", stock=7),
        ],
    ),
)


class SampleCatalog:
    """Read-only product source backed by the sample set.

    Filters are case-insensitive, unlike the live store. Every call
    returns fresh copies so callers cannot alter the sample set.
    """

    def __init__(self, products: tuple[Product, ...] = SAMPLE_PRODUCTS) -> None:
        self._products = products

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> list[Product]:
        return [p.model_copy(deep=True) for p in self._products]

    def by_category(self, category: str) -> list[Product]:
        wanted = category.lower()
        return [p for p in self.all() if p.category.value.lower() == wanted]

    def by_color(self, color: str) -> list[Product]:
        return [p for p in self.all() if p.has_color(color)]
