"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.model.category import Category, CategoryName
from catalog.domain.repository.category_repository import CategoryRepository


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: int) -> Category | None:
        for raw in self._load_raw():
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def exists_by_name(self, name: str) -> bool:
        return any(raw["name"].lower() == name.lower() for raw in self._load_raw())

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, category: Category) -> None:
        categories = self._load_raw()

        if category.id is None:
            category.id = max((c["id"] for c in categories), default=0) + 1

        for i, raw in enumerate(categories):
            if raw["id"] == category.id:
                categories[i] = self._to_raw(category)
                break
        else:
            categories.append(self._to_raw(category))

        self._file_path.write_text(
            json.dumps(categories, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name.value,
            "description": category.description,
            "product_ids": list(category.product_ids),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=CategoryName(raw["name"]),
            description=raw.get("description"),
            product_ids=list(raw.get("product_ids", [])),
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
