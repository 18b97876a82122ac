"""Application service: Show All Categories use case (query).

Every category is returned with all of its courses resolved, whatever
their status. Filtering down to published courses is intentionally not
done here.
"""

from __future__ import annotations

from catalog.application.dto import CategoryDTO, category_to_dto
from catalog.application.ensure_default_category import EnsureDefaultCategoryHandler
from catalog.domain.repository.category_repository import CategoryRepository


class ShowAllCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[CategoryDTO]:
        EnsureDefaultCategoryHandler(self._category_repo).handle()

        return [
            category_to_dto(category, self._category_repo.resolve_courses(category))
            for category in self._category_repo.list_all()
        ]
