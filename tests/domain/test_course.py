"""Unit tests for Course, CourseStatus and Review."""

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.course import Course, CourseStatus, Review


class TestCourseStatus:

    @pytest.mark.parametrize("raw", ["Published", "published", " PUBLISHED "])
    def test_parse_is_case_insensitive(self, raw):
        assert CourseStatus.parse(raw) is CourseStatus.PUBLISHED

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown course status"):
            CourseStatus.parse("Archived")


class TestCourse:

    def test_defaults(self):
        course = Course(name="HTML")
        assert course.status is CourseStatus.DRAFT
        assert course.sold == 0
        assert course.rating_and_reviews == []
        assert course.reviews is None
        assert not course.is_published

    def test_published(self):
        assert Course(name="HTML", status=CourseStatus.PUBLISHED).is_published

    def test_negative_sold_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Course(name="HTML", sold=-5)

    def test_add_review(self):
        course = Course(name="HTML")
        course.add_review("r1")
        assert course.rating_and_reviews == ["r1"]


class TestReview:

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range_rejected(self, rating):
        with pytest.raises(ValidationError, match="between 1 and 5"):
            Review(rating=rating)

    def test_valid_review(self):
        review = Review(rating=5, review="Loved it")
        assert review.rating == 5
        assert review.id is None
