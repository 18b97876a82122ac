"""CLI commands for seeding courses and reviews."""

from __future__ import annotations

import click

from catalog.application.add_course import AddCourseHandler
from catalog.application.add_review import AddReviewHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.course import CourseStatus
from catalog.infrastructure.bootstrap import repositories


@click.command("add")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--name", required=True, help="Course name.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in CourseStatus], case_sensitive=False),
    default=CourseStatus.DRAFT.value,
    show_default=True,
    help="Publication status.",
)
@click.option("--sold", type=int, default=0, show_default=True, help="Units sold.")
def course_add(category_id: str, name: str, status: str, sold: int) -> None:
    """Add a course to a category."""
    repos = repositories()
    handler = AddCourseHandler(category_repo=repos.categories, course_repo=repos.courses)

    try:
        dto = handler.handle(category_id=category_id, name=name, status=status, sold=sold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Course #{dto.id} '{dto.name}' added to category #{category_id} ({dto.status})")


@click.command("review")
@click.option("--course", "course_id", required=True, help="Course ID.")
@click.option("--rating", required=True, type=click.IntRange(1, 5), help="Rating, 1 to 5.")
@click.option("--text", default="", help="Review text.")
def course_review(course_id: str, rating: int, text: str) -> None:
    """Attach a review to a course."""
    repos = repositories()
    handler = AddReviewHandler(course_repo=repos.courses, review_repo=repos.reviews)

    try:
        dto = handler.handle(course_id=course_id, rating=rating, text=text)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review #{dto.id} ({dto.rating}/5) added to course #{course_id}")
