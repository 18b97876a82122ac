"""Category aggregate.

A category groups courses for browsing. It holds a non-owning, ordered
list of course ids; the courses themselves live in their own collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CATEGORY_NAME = "General"
DEFAULT_CATEGORY_DESCRIPTION = "Default category for uncategorized courses"


@dataclass
class Category:
    """A catalog category.

    ``id`` is None until the store assigns one on first save. Name
    uniqueness is the store's responsibility, not the aggregate's.
    """

    name: str
    description: str | None = None
    courses: list[str] = field(default_factory=list)
    id: str | None = None

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        """Factory for a brand-new category with no courses."""
        return Category(name=name, description=description, courses=[])

    @staticmethod
    def default() -> Category:
        return Category.create(DEFAULT_CATEGORY_NAME, DEFAULT_CATEGORY_DESCRIPTION)

    def add_course(self, course_id: str) -> None:
        if course_id not in self.courses:
            self.courses.append(course_id)
