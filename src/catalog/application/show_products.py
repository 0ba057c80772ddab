"""Application service: Show / List / Search Products use cases (queries)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return to_product_dto(product)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._product_repo.list_all()]


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, term: str) -> list[ProductDTO]:
        """Match *term* against name or SKU; a blank term matches nothing."""
        if not term or not term.strip():
            return []
        return [to_product_dto(p) for p in self._product_repo.search(term.strip())]
