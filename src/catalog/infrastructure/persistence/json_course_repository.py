"""JSON-file-backed implementations of CourseRepository and ReviewRepository."""

from __future__ import annotations

from dataclasses import replace

from catalog.domain.model.course import Course, CourseStatus, Review
from catalog.domain.repository.course_repository import CourseRepository, ReviewRepository
from catalog.infrastructure.persistence.json_collection import JsonCollection


class JsonCourseRepository(JsonCollection, CourseRepository):

    # --- CourseRepository interface -------------------------------------------

    def get_by_id(self, course_id: str) -> Course | None:
        for raw in self._load_raw():
            if raw["id"] == course_id:
                return self._to_domain(raw)
        return None

    def get_many(self, course_ids: list[str]) -> list[Course]:
        by_id = {raw["id"]: raw for raw in self._load_raw()}
        return [self._to_domain(by_id[cid]) for cid in course_ids if cid in by_id]

    def save(self, course: Course) -> None:
        records = self._load_raw()
        if course.id is None:
            course.id = self._next_id(records)
        self._upsert(records, self._to_raw(course))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(course: Course) -> dict:
        return {
            "id": course.id,
            "name": course.name,
            "status": course.status.value,
            "sold": course.sold,
            "rating_and_reviews": list(course.rating_and_reviews),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Course:
        return Course(
            id=raw["id"],
            name=raw["name"],
            status=CourseStatus(raw.get("status", CourseStatus.DRAFT.value)),
            sold=raw.get("sold", 0),
            rating_and_reviews=list(raw.get("rating_and_reviews", [])),
        )


class JsonReviewRepository(JsonCollection, ReviewRepository):

    def get_many(self, review_ids: list[str]) -> list[Review]:
        by_id = {raw["id"]: raw for raw in self._load_raw()}
        return [
            Review(id=raw["id"], rating=raw["rating"], review=raw.get("review", ""))
            for raw in (by_id[rid] for rid in review_ids if rid in by_id)
        ]

    def save(self, review: Review) -> Review:
        records = self._load_raw()
        if review.id is None:
            review = replace(review, id=self._next_id(records))
        self._upsert(
            records, {"id": review.id, "rating": review.rating, "review": review.review}
        )
        self._persist_raw(records)
        return review
