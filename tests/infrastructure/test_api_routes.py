"""Tests for the HTTP routes, through FastAPI's TestClient."""

import random

import pytest
from fastapi.testclient import TestClient

from catalog.infrastructure.api.app import create_app
from catalog.infrastructure.bootstrap import Repositories
from tests.fakes import BrokenCategoryRepository, FakeCategoryRepository, draft, published

PREFIX = "/api/v1/course"


def _client(repo: FakeCategoryRepository) -> TestClient:
    repos = Repositories(categories=repo, courses=repo.course_repo, reviews=repo.review_repo)
    return TestClient(create_app(repos=repos, rng=random.Random(0)))


@pytest.fixture
def repo():
    return FakeCategoryRepository()


class TestCreateCategoryRoute:

    def test_created(self, repo):
        resp = _client(repo).post(
            f"{PREFIX}/createCategory", json={"name": "Web", "description": "HTML"}
        )
        body = resp.json()
        assert resp.status_code == 200
        assert body["success"] is True
        assert body["message"] == "Category Created Successfully"
        assert body["data"] == {"id": "1", "name": "Web", "description": "HTML", "courses": []}

    def test_missing_name_is_400(self, repo):
        resp = _client(repo).post(f"{PREFIX}/createCategory", json={"description": "x"})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "message": "All fields are required"}

    def test_missing_body_gets_envelope(self, repo):
        resp = _client(repo).post(f"{PREFIX}/createCategory")
        body = resp.json()
        assert resp.status_code == 500
        assert body["success"] is False
        assert "detail" not in body

    def test_whitespace_name_accepted(self, repo):
        resp = _client(repo).post(f"{PREFIX}/createCategory", json={"name": "  "})
        assert resp.status_code == 200
        assert resp.json()["data"]["name"] == "  "

    def test_duplicate_name_is_500(self, repo):
        client = _client(repo)
        client.post(f"{PREFIX}/createCategory", json={"name": "Web"})
        resp = client.post(f"{PREFIX}/createCategory", json={"name": "Web"})
        assert resp.status_code == 500
        assert resp.json()["success"] is False
        assert "Duplicate" in resp.json()["message"]


class TestShowAllCategoriesRoute:

    def test_lists_general_and_resolved_courses(self, repo):
        repo.add("Web", published("HTML", sold=2), draft("CSS"))

        resp = _client(repo).get(f"{PREFIX}/showAllCategories")
        body = resp.json()

        assert resp.status_code == 200
        assert body["success"] is True
        by_name = {c["name"]: c for c in body["data"]}
        assert "General" in by_name
        assert [c["name"] for c in by_name["Web"]["courses"]] == ["HTML", "CSS"]
        assert by_name["Web"]["courses"][0]["ratingAndReviews"] == []

    def test_store_failure_is_500(self):
        resp = _client(BrokenCategoryRepository()).get(f"{PREFIX}/showAllCategories")
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "connection refused"}


class TestCategoryPageDetailsRoute:

    def test_full_page(self, repo):
        web = repo.add("Web", published("HTML", sold=5))
        repo.add("Data", published("Pandas", sold=9))

        resp = _client(repo).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": web.id}
        )
        data = resp.json()["data"]

        assert resp.status_code == 200
        assert set(data) == {"selectedCategory", "differentCategory", "mostSellingCourses"}
        assert data["selectedCategory"]["id"] == web.id
        assert data["differentCategory"]["name"] == "Data"
        assert [c["sold"] for c in data["mostSellingCourses"]] == [9, 5]

    def test_only_category_has_null_different_category(self, repo):
        web = repo.add("Web", published("HTML"))

        resp = _client(repo).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": web.id}
        )

        assert resp.json()["data"]["differentCategory"] is None

    def test_empty_category_short_circuits(self, repo):
        web = repo.add("Web", draft("HTML"))
        repo.add("Data", published("Pandas"))

        resp = _client(repo).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": web.id}
        )
        body = resp.json()

        assert resp.status_code == 200
        assert body["success"] is True
        assert body["message"] == "No courses found for the selected category."
        assert list(body["data"]) == ["selectedCategory"]

    def test_unknown_category_is_404(self, repo):
        resp = _client(repo).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": "nope"}
        )
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "message": "Category not found"}

    def test_missing_category_id_is_404(self, repo):
        repo.add("Web", published("HTML"))

        resp = _client(repo).post(f"{PREFIX}/getCategoryPageDetails", json={})

        assert resp.status_code == 404
        assert resp.json() == {"success": False, "message": "Category not found"}

    def test_numeric_category_id_is_looked_up_as_string(self, repo):
        web = repo.add("Web", published("HTML"))

        resp = _client(repo).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": int(web.id)}
        )

        assert resp.status_code == 200
        assert resp.json()["data"]["selectedCategory"]["id"] == web.id

    def test_unknown_numeric_category_id_is_404(self, repo):
        resp = _client(repo).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": 999}
        )
        assert resp.status_code == 404
        assert resp.json()["success"] is False

    def test_unusable_category_id_gets_envelope(self, repo):
        resp = _client(repo).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": {"$ne": None}}
        )
        assert resp.status_code == 500
        assert resp.json()["success"] is False

    def test_store_failure_is_500(self):
        resp = _client(BrokenCategoryRepository()).post(
            f"{PREFIX}/getCategoryPageDetails", json={"categoryId": "1"}
        )
        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "message": "Internal server error",
            "error": "connection refused",
        }


def test_health(repo):
    assert _client(repo).get("/health").json() == {"status": "ok"}
