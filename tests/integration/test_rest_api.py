"""Integration tests for the REST adapter."""

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from bulletin_board.adapters.inbound.rest_api import create_app as create_rest_app
from bulletin_board.adapters.inbound.server import create_app
from bulletin_board.domain.services.post_repository import PostRepository
from bulletin_board.infrastructure.metrics import BulletinBoardMetrics


pytestmark = pytest.mark.integration


class TestListPosts:
    """GET /v1/api/list"""

    def test_first_page(self, client):
        """Test a page of posts as a JSON array."""
        response = client.get("/v1/api/list", params={"page": 1, "per_page": 2})

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "title": "投稿1", "content": "これはサンプル投稿1です"},
            {"id": 2, "title": "投稿2", "content": "これはサンプル投稿2です"},
        ]

    def test_out_of_range_page(self, client):
        """Test a page past the end is an empty array."""
        response = client.get("/v1/api/list?page=5&per_page=10")

        assert response.status_code == 200
        assert response.json() == []

    def test_missing_page(self, client):
        """Test page is required."""
        response = client.get("/v1/api/list?per_page=10")

        assert response.status_code == 400
        assert response.json() == {
            "code": 400,
            "message": "Invalid page parameter",
            "detail": "The 'page' parameter must be a positive integer.",
        }

    @pytest.mark.parametrize("per_page", ["0", "-2", "ten", ""])
    def test_bad_per_page(self, client, per_page):
        """Test per_page must be a positive integer."""
        response = client.get(f"/v1/api/list?page=1&per_page={per_page}")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid per_page parameter"

    def test_oversized_page(self, client):
        """Test a page beyond the 64-bit range is a 400, not a crash."""
        response = client.get("/v1/api/list", params={"page": "1" * 5000, "per_page": 10})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid page parameter"


class TestGetPostDetail:
    """GET /v1/api/detail/{id}"""

    def test_existing(self, client):
        """Test reading a post."""
        response = client.get("/v1/api/detail/2")

        assert response.status_code == 200
        assert response.json() == {"id": 2, "title": "投稿2", "content": "これはサンプル投稿2です"}

    def test_not_found(self, client):
        """Test an unknown id is a 404."""
        response = client.get("/v1/api/detail/9999")

        assert response.status_code == 404
        assert response.json() == {
            "code": 404,
            "message": "Resource not found",
            "detail": "The post with ID 9999 was not found.",
        }

    def test_not_found_reports_canonical_id(self, client):
        """Test the detail names the parsed id, not the padded text."""
        response = client.get("/v1/api/detail/+0042")

        assert response.status_code == 404
        assert response.json()["detail"] == "The post with ID 42 was not found."

    def test_largest_id_is_looked_up(self, client):
        """Test the 64-bit maximum is a valid id that simply does not exist."""
        response = client.get("/v1/api/detail/9223372036854775807")

        assert response.status_code == 404

    @pytest.mark.parametrize("raw_id", ["abc", "0", "-1", "1.5", "9" * 5000, "9223372036854775808"])
    def test_invalid_id(self, client, raw_id):
        """Test malformed ids are a 400."""
        response = client.get(f"/v1/api/detail/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {
            "code": 400,
            "message": "Invalid ID",
            "detail": "The 'id' parameter must be a positive integer.",
        }


class TestCreatePost:
    """POST /v1/api/create"""

    def test_create(self, client, seeded_repository):
        """Test the server assigns the next id."""
        response = client.post(
            "/v1/api/create",
            json={"title": "新しい投稿", "content": "これは新しい投稿の内容です"},
        )

        assert response.status_code == 200
        assert response.json() == {"id": 4, "title": "新しい投稿", "content": "これは新しい投稿の内容です"}
        assert seeded_repository.get(4).title == "新しい投稿"

    def test_client_id_is_ignored(self, client):
        """Test a client-supplied id never wins."""
        response = client.post("/v1/api/create", json={"id": 77, "title": "t", "content": "c"})

        assert response.status_code == 200
        assert response.json()["id"] == 4

    def test_malformed_json(self, client):
        """Test an unparsable body is a 400 in the shared error shape."""
        response = client.post(
            "/v1/api/create",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == 400
        assert body["message"] == "Invalid request parameters"
        assert body["detail"]

    def test_wrong_field_type(self, client):
        """Test non-string fields are rejected."""
        response = client.post("/v1/api/create", json={"title": 1, "content": "c"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request parameters"

    @pytest.mark.parametrize(
        "payload,detail",
        [
            ({"title": "", "content": "c"}, "title is required"),
            ({"content": "c"}, "title is required"),
            ({"title": "t"}, "content is required"),
        ],
    )
    def test_required_fields(self, client, payload, detail):
        """Test empty or missing fields are rejected and named."""
        response = client.post("/v1/api/create", json=payload)

        assert response.status_code == 400
        assert response.json() == {
            "code": 400,
            "message": "Invalid request parameters",
            "detail": detail,
        }


class TestUpdatePost:
    """PUT /v1/api/update/{id}"""

    def test_update(self, client, seeded_repository):
        """Test title and content are replaced in place."""
        response = client.put(
            "/v1/api/update/2",
            json={"title": "更新された投稿", "content": "これは更新された投稿の内容です"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": 2,
            "title": "更新された投稿",
            "content": "これは更新された投稿の内容です",
        }
        assert [p.id for p in seeded_repository.list(1, 10)] == [1, 2, 3]
        assert seeded_repository.get(2).title == "更新された投稿"

    def test_update_allows_empty_fields(self, client):
        """Test update accepts empty strings."""
        response = client.put("/v1/api/update/1", json={"title": "", "content": ""})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "title": "", "content": ""}

    def test_update_not_found(self, client):
        """Test updating an unknown id."""
        response = client.put("/v1/api/update/9999", json={"title": "t", "content": "c"})

        assert response.status_code == 404
        assert response.json()["message"] == "Resource not found"

    def test_update_invalid_id(self, client):
        """Test updating with a malformed id."""
        response = client.put("/v1/api/update/x", json={"title": "t", "content": "c"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID"


class TestDeletePost:
    """DELETE /v1/api/delete/{id}"""

    def test_delete(self, client, seeded_repository):
        """Test deleting keeps the order of the rest."""
        response = client.delete("/v1/api/delete/2")

        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted"}
        assert [p.id for p in seeded_repository.list(1, 10)] == [1, 3]

    def test_delete_not_found(self, client):
        """Test deleting an unknown id."""
        response = client.delete("/v1/api/delete/9999")

        assert response.status_code == 404
        assert response.json()["detail"] == "The post with ID 9999 was not found."

    def test_delete_invalid_id(self, client):
        """Test deleting with a malformed id."""
        response = client.delete("/v1/api/delete/-3")

        assert response.status_code == 400


class TestErrorHandling:
    """Test unexpected failures."""

    def test_unexpected_error_is_500(self):
        """Test an unexpected fault renders the shared error body."""
        class BrokenRepository(PostRepository):
            def list(self, page, per_page):
                raise RuntimeError("boom")

        app = create_rest_app(BrokenRepository())
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/v1/api/list?page=1&per_page=1")

        assert response.status_code == 500
        assert response.json() == {
            "code": 500,
            "message": "Internal server error",
            "detail": "An unexpected error occurred.",
        }

    def test_unexpected_error_is_counted(self, test_config):
        """Test a 500 from an unhandled fault lands in the request counter."""
        class BrokenRepository(PostRepository):
            def get(self, post_id):
                raise RuntimeError("boom")

        metrics = BulletinBoardMetrics(registry=CollectorRegistry())
        app = create_app(BrokenRepository(), metrics=metrics, config=test_config)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/v1/api/detail/1")

        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"
        assert metrics.registry.get_sample_value(
            "bbs_requests_total", {"protocol": "rest", "status": "500"}
        ) == 1
