"""Abstract repository for the Category aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, document store,
in-memory) live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category
from catalog.domain.model.course import Course, CourseStatus


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Category | None:
        """Return a category by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category in insertion order."""

    @abstractmethod
    def list_except(self, category_id: str) -> list[Category]:
        """Return every category whose ID is not ``category_id``."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category, assigning an ID if needed.

        Raises StoreError if another category already has the same name.
        """

    @abstractmethod
    def resolve_courses(
        self,
        category: Category,
        status: CourseStatus | None = None,
        with_reviews: bool = False,
    ) -> list[Course]:
        """Resolve an already loaded category's course ids into Course objects.

        Keeps the category's ordering. When ``status`` is given only
        courses in that status are returned; ids that no longer resolve
        are skipped. With ``with_reviews`` each course has its
        ``reviews`` filled in.
        """
