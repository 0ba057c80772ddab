"""Application services: inventory reports (queries).

Both reports are read-only and aggregate over the whole catalog.
"""

from __future__ import annotations

from catalog.application.dto import InventoryValueDTO, ProductDTO, to_product_dto
from catalog.domain.model.value_objects import DEFAULT_LOW_STOCK_THRESHOLD, Money
from catalog.domain.repository.product_repository import ProductRepository


class LowStockReportHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> list[ProductDTO]:
        """Products at or below *threshold*, lowest stock first."""
        low = [p for p in self._product_repo.list_all() if p.is_low_stock(threshold)]
        low.sort(key=lambda p: p.stock)
        return [to_product_dto(p) for p in low]


class InventoryValueHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[InventoryValueDTO]:
        """Total value of stock on hand, one line per currency.

        Amounts in different currencies are never added together.
        """
        totals: dict[str, Money] = {}
        counts: dict[str, int] = {}
        for product in self._product_repo.list_all():
            value = product.calculate_inventory_value()
            currency = value.currency
            totals[currency] = totals[currency].add(value) if currency in totals else value
            counts[currency] = counts.get(currency, 0) + 1

        return [
            InventoryValueDTO(
                currency=currency,
                total=str(totals[currency]),
                product_count=counts[currency],
            )
            for currency in sorted(totals)
        ]
