"""Application service: Category Page Details use case (query).

Builds the landing page of a category:

  1. the selected category with its published courses (reviews resolved),
  2. one other category picked uniformly at random, published courses only,
  3. the ten best-selling published courses across *all* categories,
     the selected one included.

When the selected category has no published courses, steps 2 and 3 are
skipped entirely and only the selected category is returned.
"""

from __future__ import annotations

import logging
import random

from catalog.application.dto import (
    CategoryDTO,
    CategoryPageDTO,
    category_to_dto,
    course_to_dto,
)
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.course import Course, CourseStatus
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)

MOST_SELLING_LIMIT = 10
NO_COURSES_MESSAGE = "No courses found for the selected category."


class CategoryPageDetailsHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        rng: random.Random | None = None,
    ) -> None:
        self._category_repo = category_repo
        self._rng = rng or random.Random()

    def handle(self, category_id: str | None) -> CategoryPageDTO:
        category = self._category_repo.get_by_id(category_id) if category_id else None
        if category is None:
            logger.info("Category %s not found", category_id)
            raise EntityNotFoundError("Category not found")

        courses = self._category_repo.resolve_courses(
            category, status=CourseStatus.PUBLISHED, with_reviews=True
        )
        selected = category_to_dto(category, courses)

        if not courses:
            logger.info("No published courses in category %s", category_id)
            return CategoryPageDTO(selected_category=selected, message=NO_COURSES_MESSAGE)

        return CategoryPageDTO(
            selected_category=selected,
            different_category=self._pick_different_category(category_id),
            most_selling_courses=[course_to_dto(c) for c in self._most_selling_courses()],
        )

    # --- Steps ----------------------------------------------------------------

    def _pick_different_category(self, category_id: str) -> CategoryDTO | None:
        """Pick one other category uniformly, ignoring how many courses it has."""
        candidates = self._category_repo.list_except(category_id)
        if not candidates:
            return None

        peer = candidates[self._rng.randrange(len(candidates))]
        logger.debug(
            "Picked category %s out of %d candidates", peer.id, len(candidates)
        )
        courses = self._category_repo.resolve_courses(
            peer, status=CourseStatus.PUBLISHED
        )
        return category_to_dto(peer, courses)

    def _most_selling_courses(self) -> list[Course]:
        all_courses: list[Course] = []
        for category in self._category_repo.list_all():
            all_courses.extend(
                self._category_repo.resolve_courses(
                    category, status=CourseStatus.PUBLISHED
                )
            )

        # sorted() is stable, so equal ``sold`` keep their order of appearance
        ranked = sorted(all_courses, key=lambda c: c.sold, reverse=True)
        logger.debug("Ranked %d published courses by sales", len(ranked))
        return ranked[:MOST_SELLING_LIMIT]
