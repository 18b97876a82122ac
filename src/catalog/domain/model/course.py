"""Course and Review entities.

Courses are owned by their own subsystem; this package only needs the
fields that drive category pages: publication status, units sold and
the attached reviews.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from catalog.domain.exceptions import ValidationError


class CourseStatus(Enum):
    DRAFT = "Draft"
    PUBLISHED = "Published"

    @staticmethod
    def parse(raw: str) -> CourseStatus:
        """Case-insensitive lookup by value, e.g. ``"published"``."""
        for status in CourseStatus:
            if status.value.lower() == raw.strip().lower():
                return status
        raise ValidationError(f"Unknown course status: {raw!r}")


@dataclass(frozen=True)
class Review:
    """A single rating left on a course."""

    rating: int
    review: str = ""
    id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.rating, int) or not 1 <= self.rating <= 5:
            raise ValidationError("Rating must be an integer between 1 and 5")


@dataclass
class Course:
    """A course as seen from the catalog.

    ``rating_and_reviews`` always holds review ids. ``reviews`` is only
    filled in when the store was asked to resolve them.
    """

    name: str
    status: CourseStatus = CourseStatus.DRAFT
    sold: int = 0
    rating_and_reviews: list[str] = field(default_factory=list)
    reviews: list[Review] | None = None
    id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.sold, int) or self.sold < 0:
            raise ValidationError("Sold count cannot be negative")

    @property
    def is_published(self) -> bool:
        return self.status is CourseStatus.PUBLISHED

    def add_review(self, review_id: str) -> None:
        self.rating_and_reviews.append(review_id)
