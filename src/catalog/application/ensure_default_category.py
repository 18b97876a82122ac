"""Application service: Ensure Default Category use case.

Guarantees that the sentinel "General" category exists. Safe to call on
every listing request. The lookup-then-create sequence is not atomic;
two concurrent first calls may both try to create it and the store's
name uniqueness decides the winner.
"""

from __future__ import annotations

import logging

from catalog.domain.model.category import DEFAULT_CATEGORY_NAME, Category
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class EnsureDefaultCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> Category:
        existing = self._category_repo.get_by_name(DEFAULT_CATEGORY_NAME)
        if existing is not None:
            return existing

        category = Category.default()
        self._category_repo.save(category)
        logger.info("Default category %r created (id=%s)", category.name, category.id)
        return category
