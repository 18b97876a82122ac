"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI surfaces and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catalog.domain.model.category import Category
from catalog.domain.model.course import Course, Review


@dataclass(frozen=True)
class ReviewDTO:
    id: str
    rating: int
    review: str


@dataclass(frozen=True)
class CourseDTO:
    """Output: a resolved course.

    ``rating_and_reviews`` holds ReviewDTOs when reviews were resolved,
    plain review ids otherwise.
    """

    id: str
    name: str
    status: str
    sold: int
    rating_and_reviews: list[ReviewDTO] | list[str]


@dataclass(frozen=True)
class CategoryDTO:
    """Output: a category.

    ``courses`` holds CourseDTOs when courses were resolved, plain
    course ids otherwise.
    """

    id: str
    name: str
    description: str | None
    courses: list[CourseDTO] | list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryPageDTO:
    """Output: the landing page of a category.

    ``different_category`` and ``most_selling_courses`` are None when
    the selected category has no published courses.
    """

    selected_category: CategoryDTO
    different_category: CategoryDTO | None = None
    most_selling_courses: list[CourseDTO] | None = None
    message: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.most_selling_courses is None


# --- Mapping ------------------------------------------------------------------


def review_to_dto(review: Review) -> ReviewDTO:
    return ReviewDTO(id=review.id, rating=review.rating, review=review.review)  # type: ignore[arg-type]


def course_to_dto(course: Course) -> CourseDTO:
    if course.reviews is not None:
        reviews: list[ReviewDTO] | list[str] = [review_to_dto(r) for r in course.reviews]
    else:
        reviews = list(course.rating_and_reviews)
    return CourseDTO(
        id=course.id,  # type: ignore[arg-type]
        name=course.name,
        status=course.status.value,
        sold=course.sold,
        rating_and_reviews=reviews,
    )


def category_to_dto(
    category: Category, courses: list[Course] | None = None
) -> CategoryDTO:
    """Map a category, optionally with its resolved courses."""
    return CategoryDTO(
        id=category.id,  # type: ignore[arg-type]
        name=category.name,
        description=category.description,
        courses=(
            [course_to_dto(c) for c in courses]
            if courses is not None
            else list(category.courses)
        ),
    )
