"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductSKU
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def get_by_sku(self, sku: ProductSKU) -> Product | None:
        for p in self._store.values():
            if p.sku == sku:
                return p
        return None

    def exists_by_sku(self, sku: ProductSKU) -> bool:
        return self.get_by_sku(sku) is not None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def search(self, term: str) -> list[Product]:
        needle = term.lower()
        return [
            p for p in self._store.values()
            if needle in p.name.lower() or needle in p.sku.value.lower()
        ]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.assign_id(self._next_id)
        self._next_id = max(self._next_id, product.id + 1)
        self._store[product.id] = product

    def delete(self, product_id: int) -> None:
        self._store.pop(product_id, None)


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._store: dict[int, Category] = {}
        self._next_id = 1
        for c in categories or []:
            self.save(c)

    def get_by_id(self, category_id: int) -> Category | None:
        return self._store.get(category_id)

    def exists_by_name(self, name: str) -> bool:
        return any(c.name.value.lower() == name.lower() for c in self._store.values())

    def list_all(self) -> list[Category]:
        return list(self._store.values())

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = self._next_id
        self._next_id = max(self._next_id, category.id + 1)
        self._store[category.id] = category
