"""CLI commands for the Category aggregate."""

from __future__ import annotations

import json

import click

from catalog.application.category_page_details import CategoryPageDetailsHandler
from catalog.application.create_category import CreateCategoryHandler
from catalog.application.show_all_categories import ShowAllCategoriesHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.api.envelope import page_ok
from catalog.infrastructure.bootstrap import repositories


@click.command("create")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default=None, help="Optional description.")
def category_create(name: str, description: str | None) -> None:
    """Create a new, empty category."""
    handler = CreateCategoryHandler(category_repo=repositories().categories)

    try:
        dto = handler.handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}' created")


@click.command("list")
def category_list() -> None:
    """List all categories with their courses."""
    handler = ShowAllCategoriesHandler(category_repo=repositories().categories)

    try:
        categories = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'ID':<6} {'Name':<24} {'Courses':>8} {'Published':>10}")
    click.echo("-" * 51)
    for c in categories:
        published = sum(1 for course in c.courses if course.status == "Published")
        click.echo(f"{c.id:<6} {c.name:<24} {len(c.courses):>8} {published:>10}")


@click.command("page")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_page(category_id: str) -> None:
    """Show a category's landing page as JSON."""
    handler = CategoryPageDetailsHandler(category_repo=repositories().categories)

    try:
        page = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(page_ok(page).body, indent=2))
