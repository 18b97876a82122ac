"""Abstract repositories for the Course and Review collections."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.course import Course, Review


class CourseRepository(ABC):

    @abstractmethod
    def get_by_id(self, course_id: str) -> Course | None:
        """Return a course by its ID, or None if not found."""

    @abstractmethod
    def get_many(self, course_ids: list[str]) -> list[Course]:
        """Return the courses for the given IDs, in the given order.

        Unknown IDs are skipped.
        """

    @abstractmethod
    def save(self, course: Course) -> None:
        """Persist a new or updated course, assigning an ID if needed."""


class ReviewRepository(ABC):

    @abstractmethod
    def get_many(self, review_ids: list[str]) -> list[Review]:
        """Return the reviews for the given IDs; unknown IDs are skipped."""

    @abstractmethod
    def save(self, review: Review) -> Review:
        """Persist a review and return it with its assigned ID."""
