"""Application service: Add Review use case."""

from __future__ import annotations

from catalog.application.dto import ReviewDTO, review_to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.course import Review
from catalog.domain.repository.course_repository import CourseRepository, ReviewRepository


class AddReviewHandler:

    def __init__(
        self,
        course_repo: CourseRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._course_repo = course_repo
        self._review_repo = review_repo

    def handle(self, course_id: str, rating: int, text: str = "") -> ReviewDTO:
        """Attach a rating to an existing course."""
        course = self._course_repo.get_by_id(course_id)
        if course is None:
            raise EntityNotFoundError(f"Course with ID '{course_id}' not found")

        review = self._review_repo.save(Review(rating=rating, review=text))
        course.add_review(review.id)  # type: ignore[arg-type]
        self._course_repo.save(course)
        return review_to_dto(review)
