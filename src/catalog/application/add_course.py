"""Application service: Add Course use case.

Registers a course and links it into a category's course list, so a
category page has something to show.
"""

from __future__ import annotations

from catalog.application.dto import CourseDTO, course_to_dto
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.course import Course, CourseStatus
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.course_repository import CourseRepository


class AddCourseHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        course_repo: CourseRepository,
    ) -> None:
        self._category_repo = category_repo
        self._course_repo = course_repo

    def handle(
        self,
        category_id: str,
        name: str,
        status: str = CourseStatus.DRAFT.value,
        sold: int = 0,
    ) -> CourseDTO:
        if not name:
            raise ValidationError("Course name is required")

        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID '{category_id}' not found")

        course = Course(name=name, status=CourseStatus.parse(status), sold=sold)
        self._course_repo.save(course)

        category.add_course(course.id)  # type: ignore[arg-type]
        self._category_repo.save(category)
        return course_to_dto(course)
