"""Application service: Create Category use case."""

from __future__ import annotations

import logging

from catalog.application.dto import CategoryDTO, category_to_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CreateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str | None, description: str | None = None) -> CategoryDTO:
        """Create a new, empty category.

        Name uniqueness is left to the store: a duplicate surfaces as
        StoreError, not ValidationError.
        """
        if not name:
            raise ValidationError("All fields are required")

        category = Category.create(name=name, description=description)
        self._category_repo.save(category)
        logger.info("Category %r created (id=%s)", category.name, category.id)
        return category_to_dto(category)
