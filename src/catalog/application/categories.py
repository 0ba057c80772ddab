"""Application services: Add Category and List Categories use cases."""

from __future__ import annotations

import logging

from catalog.application.dto import CategoryDTO, to_category_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, description: str | None = None) -> CategoryDTO:
        category = Category.create(name, description)

        if self._category_repo.exists_by_name(category.name.value):
            raise ValidationError(
                f"Category '{category.name}' already exists", code="CATEGORY_003"
            )

        self._category_repo.save(category)
        logger.info("Added category #%s '%s'", category.id, category.name)
        return to_category_dto(category)


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[CategoryDTO]:
        return [to_category_dto(c) for c in self._category_repo.list_all()]
