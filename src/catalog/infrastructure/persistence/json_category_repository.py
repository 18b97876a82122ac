"""JSON-file-backed implementation of CategoryRepository.

Course resolution reads the course (and optionally review) collections,
standing in for a document store's "populate".
"""

from __future__ import annotations

from pathlib import Path

from catalog.domain.exceptions import StoreError
from catalog.domain.model.category import Category
from catalog.domain.model.course import Course, CourseStatus
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.course_repository import CourseRepository, ReviewRepository
from catalog.infrastructure.persistence.json_collection import JsonCollection


class JsonCategoryRepository(JsonCollection, CategoryRepository):

    def __init__(
        self,
        file_path: Path,
        course_repo: CourseRepository,
        review_repo: ReviewRepository,
    ) -> None:
        super().__init__(file_path)
        self._course_repo = course_repo
        self._review_repo = review_repo

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: str) -> Category | None:
        for raw in self._load_raw():
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Category | None:
        for raw in self._load_raw():
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list_except(self, category_id: str) -> list[Category]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["id"] != category_id
        ]

    def save(self, category: Category) -> None:
        records = self._load_raw()

        # Unique index on name
        for raw in records:
            if raw["name"] == category.name and raw["id"] != category.id:
                raise StoreError(f"Duplicate category name: '{category.name}'")

        if category.id is None:
            category.id = self._next_id(records)
        self._upsert(records, self._to_raw(category))
        self._persist_raw(records)

    def resolve_courses(
        self,
        category: Category,
        status: CourseStatus | None = None,
        with_reviews: bool = False,
    ) -> list[Course]:
        courses = self._course_repo.get_many(category.courses)
        if status is not None:
            courses = [c for c in courses if c.status is status]
        if with_reviews:
            for course in courses:
                course.reviews = self._review_repo.get_many(course.rating_and_reviews)
        return courses

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
            "courses": list(category.courses),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description"),
            courses=list(raw.get("courses", [])),
        )
