from __future__ import annotations

import logging

import click
import uvicorn

from catalog.config import Settings
from catalog.infrastructure.cli.category_commands import (
    category_create,
    category_list,
    category_page,
)
from catalog.infrastructure.cli.course_commands import course_add, course_review


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Course Catalog — category management"""
    level = "DEBUG" if verbose else Settings.from_env().log_level
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level.upper(),
    )


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def course() -> None:
    """Manage courses."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from CATALOG_HOST).")
@click.option("--port", default=None, type=int, help="Port (default from CATALOG_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API under uvicorn."""
    settings = Settings.from_env()
    uvicorn.run(
        "catalog.infrastructure.api.app:create_app",
        host=host or settings.host,
        port=port or settings.port,
        factory=True,
        log_level=settings.log_level.lower(),
    )


# Register subcommands
category.add_command(category_create)
category.add_command(category_list)
category.add_command(category_page)
course.add_command(course_add)
course.add_command(course_review)
