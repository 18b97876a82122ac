"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and receives the
repositories it needs explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.config import Settings
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.course_repository import CourseRepository, ReviewRepository
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_course_repository import (
    JsonCourseRepository,
    JsonReviewRepository,
)


@dataclass(frozen=True)
class Repositories:
    categories: CategoryRepository
    courses: CourseRepository
    reviews: ReviewRepository


def repositories(settings: Settings | None = None) -> Repositories:
    settings = settings or Settings.from_env()
    data_dir = settings.data_dir

    courses = JsonCourseRepository(data_dir / "courses.json")
    reviews = JsonReviewRepository(data_dir / "reviews.json")
    categories = JsonCategoryRepository(data_dir / "categories.json", courses, reviews)
    return Repositories(categories=categories, courses=courses, reviews=reviews)
