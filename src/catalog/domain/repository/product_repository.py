"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

The repository assigns product IDs: ``save()`` on a product whose
``id`` is None must give it one via ``Product.assign_id``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductSKU


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_sku(self, sku: ProductSKU) -> Product | None:
        """Return the product with this SKU (case-insensitive), or None."""

    @abstractmethod
    def exists_by_sku(self, sku: ProductSKU) -> bool:
        """True if any persisted product already uses *sku*."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def search(self, term: str) -> list[Product]:
        """Case-insensitive substring match on name or SKU."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product.  Callers check ``can_be_deleted()`` first."""
