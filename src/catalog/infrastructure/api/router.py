"""Route definitions for the category API.

Endpoints under /api/v1/course:
- POST /createCategory          : create a category
- GET  /showAllCategories       : list categories with their courses
- POST /getCategoryPageDetails  : landing page of one category

Every route answers with the ``{success, message, data}`` envelope; no
request is allowed to escape as an unhandled error.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from catalog.application.category_page_details import CategoryPageDetailsHandler
from catalog.application.create_category import CreateCategoryHandler
from catalog.application.show_all_categories import ShowAllCategoriesHandler
from catalog.infrastructure.api.envelope import (
    INTERNAL_ERROR_MESSAGE,
    Envelope,
    failure,
    ok,
    page_ok,
)
from catalog.infrastructure.bootstrap import Repositories

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/course", tags=["category"])


class CreateCategoryRequest(BaseModel):
    # Optional here so a missing name gets the envelope's 400, not a 422
    name: Optional[str] = None
    description: Optional[str] = None


class CategoryPageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Missing or numeric ids still reach the handler and end up as 404
    category_id: Optional[Union[str, int]] = Field(default=None, alias="categoryId")

    def lookup_id(self) -> Optional[str]:
        return None if self.category_id is None else str(self.category_id)


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_rng(request: Request) -> Optional[random.Random]:
    return getattr(request.app.state, "rng", None)


def _respond(envelope: Envelope) -> JSONResponse:
    return JSONResponse(status_code=envelope.status_code, content=envelope.body)


def _fail(exc: Exception, internal_message: Optional[str] = None) -> JSONResponse:
    envelope = failure(exc, internal_message)
    if envelope.status_code >= 500:
        logger.error("Request failed: %s", exc, exc_info=exc)
    return _respond(envelope)


@router.post("/createCategory")
def create_category(
    req: CreateCategoryRequest,
    repos: Repositories = Depends(get_repositories),
) -> JSONResponse:
    handler = CreateCategoryHandler(category_repo=repos.categories)
    try:
        category = handler.handle(name=req.name, description=req.description)
    except Exception as exc:
        return _fail(exc)
    return _respond(ok(category, message="Category Created Successfully"))


@router.get("/showAllCategories")
def show_all_categories(
    repos: Repositories = Depends(get_repositories),
) -> JSONResponse:
    handler = ShowAllCategoriesHandler(category_repo=repos.categories)
    try:
        categories = handler.handle()
    except Exception as exc:
        return _fail(exc)
    return _respond(ok(categories))


@router.post("/getCategoryPageDetails")
def category_page_details(
    req: CategoryPageRequest,
    repos: Repositories = Depends(get_repositories),
    rng: Optional[random.Random] = Depends(get_rng),
) -> JSONResponse:
    handler = CategoryPageDetailsHandler(category_repo=repos.categories, rng=rng)
    try:
        page = handler.handle(req.lookup_id())
    except Exception as exc:
        return _fail(exc, internal_message=INTERNAL_ERROR_MESSAGE)
    return _respond(page_ok(page))
