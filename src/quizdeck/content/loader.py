from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from pydantic import ValidationError

from quizdeck.config.loader import read_yaml
from quizdeck.data_models import Category

logger = logging.getLogger(__name__)


def load_categories(path: Path) -> List[Category]:
    """
    Parse a YAML (or JSON) content file into validated categories.

    Expected shape::

        categories:
          - id: geography
            name: Geography
            quizzes:
              - type: TRUE_FALSE
                question: Is Vienna the capital of Austria?
                answer: true

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    ValueError
        If the file is not shaped as above or any quiz fails validation.
    """
    data = read_yaml(path)
    raw_categories = data.get("categories") if isinstance(data, dict) else None
    if not isinstance(raw_categories, list):
        raise ValueError(f"Content file {path} must define a 'categories' list.")

    categories: List[Category] = []
    for raw in raw_categories:
        try:
            categories.append(Category.model_validate(raw))
        except ValidationError as exc:
            raise ValueError(f"Invalid category in {path}: {exc}") from exc
    logger.info("Loaded %d categories from %s", len(categories), path)
    return categories


class CategoryRepository:
    """In-memory lookup of loaded categories by id, in file order."""

    def __init__(self, categories: Iterable[Category]):
        self._categories: Dict[str, Category] = {}
        for category in categories:
            if category.id in self._categories:
                raise ValueError(f"Duplicate category id: {category.id}")
            self._categories[category.id] = category

    @classmethod
    def from_path(cls, path: Path) -> "CategoryRepository":
        return cls(load_categories(path))

    def get(self, category_id: str) -> Category:
        try:
            return self._categories[category_id]
        except KeyError:
            raise KeyError(f"Unknown category: {category_id}") from None

    def all(self) -> List[Category]:
        return list(self._categories.values())
