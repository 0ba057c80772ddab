"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

``CATALOG_DATA_DIR``
    Directory holding ``products.json`` and ``categories.json``.
    Defaults to ``data/`` at the repository root.
"""

from __future__ import annotations

import os
from pathlib import Path

from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get("CATALOG_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(data_dir() / "categories.json")
