"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductSKU, StockQuantity
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_sku(self, sku: ProductSKU) -> Product | None:
        for raw in self._load_raw():
            if raw["sku"].upper() == sku.value.upper():
                return self._to_domain(raw)
        return None

    def exists_by_sku(self, sku: ProductSKU) -> bool:
        return self.get_by_sku(sku) is not None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def search(self, term: str) -> list[Product]:
        needle = term.lower()
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if needle in raw["name"].lower() or needle in raw["sku"].lower()
        ]

    def save(self, product: Product) -> None:
        products = self._load_raw()

        if product.id is None:
            product.assign_id(max((p["id"] for p in products), default=0) + 1)

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(products):
            if raw["id"] == product.id:
                products[i] = self._to_raw(product)
                break
        else:
            products.append(self._to_raw(product))

        self._persist_raw(products)
        logger.debug("Saved product #%s to %s", product.id, self._file_path)

    def delete(self, product_id: int) -> None:
        products = [raw for raw in self._load_raw() if raw["id"] != product_id]
        self._persist_raw(products)
        logger.debug("Deleted product #%s from %s", product_id, self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "sku": product.sku.value,
            "stock_quantity": product.stock.value,
            "category_id": product.category_id,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description"),
            price=Money(Decimal(raw["price"]), raw.get("currency", "JPY")),
            sku=ProductSKU(raw["sku"]),
            stock=StockQuantity(raw["stock_quantity"]),
            category_id=raw["category_id"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, products: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(products, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
