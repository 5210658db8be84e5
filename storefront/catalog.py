"""
Product catalog.

A fixed, read-only list of products. The app receives a Catalog instance
at construction time so tests can swap in their own products.
"""
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional

from storefront.errors import ERROR_PRODUCT_NOT_FOUND, NotFoundError


@dataclass(frozen=True)
class Product:
    """Immutable product record. Prices are in minor currency units."""
    id: str
    name: str
    description: str
    price_cents: int
    currency: str
    image: str

    def __post_init__(self):
        if self.price_cents < 0:
            raise ValueError(f"price_cents must be non-negative for product {self.id}")

    def to_dict(self) -> dict:
        return asdict(self)


class Catalog:
    """Ordered, read-only product list with lookup by id."""

    def __init__(self, products: Iterable[Product]):
        self._products: tuple[Product, ...] = tuple(products)
        seen = set()
        for product in self._products:
            if product.id in seen:
                raise ValueError(f"Duplicate product id in catalog: {product.id}")
            seen.add(product.id)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self):
        return iter(self._products)

    def list(self) -> List[Product]:
        """All products in catalog order."""
        return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        # Catalog is tiny, a scan is enough
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def get(self, product_id: str) -> Product:
        """Like find_by_id, but raises NotFoundError for unknown ids."""
        product = self.find_by_id(product_id)
        if product is None:
            raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
        return product


DEFAULT_PRODUCTS = (
    Product(
        id="p001",
        name="Aurora Headphones",
        description="Wireless over-ear headphones with immersive sound and 30h battery life.",
        price_cents=12999,
        currency="usd",
        image="/images/aurora.jpg",
    ),
    Product(
        id="p002",
        name="Lumen Smart Lamp",
        description="Compact smart lamp with dynamic color scenes and touch dimming.",
        price_cents=5999,
        currency="usd",
        image="/images/lumen.jpg",
    ),
    Product(
        id="p003",
        name="Nimbus Keyboard",
        description="Low-profile mechanical keyboard with hot-swappable switches.",
        price_cents=8999,
        currency="usd",
        image="/images/nimbus.jpg",
    ),
    Product(
        id="p004",
        name="Zephyr Mouse",
        description="Ergonomic wireless mouse with adjustable DPI and silent clicks.",
        price_cents=3999,
        currency="usd",
        image="/images/zephyr.jpg",
    ),
)


def default_catalog() -> Catalog:
    """Demo catalog used when the app is created without one."""
    return Catalog(DEFAULT_PRODUCTS)
