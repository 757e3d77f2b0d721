"""HTTP tests for the book endpoints."""
import uuid

import pytest


def _create(client, title="Dune", author="Frank Herbert", synopsis="Spice."):
    return client.post("/books", json={"title": title, "author": author, "synopsis": synopsis})


class TestCreateBook:
    def test_admin_creates_book(self, admin_client):
        response = _create(admin_client)

        assert response.status_code == 201
        body = response.get_json()
        assert body["title"] == "Dune"
        assert body["author"] == "Frank Herbert"
        assert body["synopsis"] == "Spice."
        assert response.headers["Location"] == f"http://localhost/books/{body['id']}"
        assert body["links"]["self"] == response.headers["Location"]
        assert body["links"]["reservations"].endswith(f"/books/{body['id']}/reservations")

    def test_synopsis_is_optional(self, admin_client):
        response = admin_client.post("/books", json={"title": "T", "author": "A"})

        assert response.status_code == 201
        assert response.get_json()["synopsis"] == ""

    def test_user_is_forbidden(self, user1_client):
        assert _create(user1_client).status_code == 403

    def test_anonymous_is_unauthorized(self, anonymous_client):
        response = _create(anonymous_client)

        assert response.status_code == 401
        assert response.get_json()["status"] == "error"

    @pytest.mark.parametrize("payload", [
        {"title": "", "author": "A"},
        {"title": "   ", "author": "A"},
        {"title": "T", "author": ""},
        {"author": "A"},
        {"title": "T"},
    ])
    def test_missing_fields_are_rejected(self, admin_client, payload):
        response = admin_client.post("/books", json=payload)

        assert response.status_code == 400
        assert response.get_json()["status"] == "error"

    def test_non_json_body_is_rejected(self, admin_client):
        response = admin_client.post("/books", data="title=T", content_type="text/plain")

        assert response.status_code == 400


class TestReadBooks:
    def test_anonymous_gets_book(self, admin_client, anonymous_client):
        book_id = _create(admin_client).get_json()["id"]

        response = anonymous_client.get(f"/books/{book_id}")

        assert response.status_code == 200
        assert response.get_json()["id"] == book_id

    def test_missing_book_is_not_found(self, anonymous_client):
        missing = uuid.uuid4()

        response = anonymous_client.get(f"/books/{missing}")

        assert response.status_code == 404
        assert response.get_json()["message"] == f"Book not found with id: {missing}"

    def test_malformed_id_is_not_found(self, anonymous_client):
        assert anonymous_client.get("/books/not-a-uuid").status_code == 404

    def test_list_is_paged(self, admin_client, anonymous_client):
        for n in range(5):
            _create(admin_client, title=f"Book {n}")

        response = anonymous_client.get("/books?offset=1&limit=2")

        assert response.status_code == 200
        body = response.get_json()
        assert body["total_count"] == 5
        assert body["offset"] == 1
        assert body["limit"] == 2
        assert len(body["items"]) == 2

    def test_list_defaults(self, anonymous_client):
        body = anonymous_client.get("/books").get_json()

        assert body == {"items": [], "total_count": 0, "offset": 0, "limit": 20}

    @pytest.mark.parametrize("query", ["offset=-1", "limit=0", "limit=101", "offset=abc", "limit=x"])
    def test_bad_paging_parameters_are_rejected(self, anonymous_client, query):
        assert anonymous_client.get(f"/books?{query}").status_code == 400


class TestUpdateBook:
    def test_admin_updates_book(self, admin_client):
        book_id = _create(admin_client).get_json()["id"]

        response = admin_client.put(
            f"/books/{book_id}", json={"title": "Dune Messiah", "author": "Frank Herbert"}
        )

        assert response.status_code == 200
        body = response.get_json()
        assert body["title"] == "Dune Messiah"
        assert body["synopsis"] == ""
        assert admin_client.get(f"/books/{book_id}").get_json()["title"] == "Dune Messiah"

    def test_update_missing_book_is_not_found(self, admin_client):
        response = admin_client.put(f"/books/{uuid.uuid4()}", json={"title": "T", "author": "A"})

        assert response.status_code == 404

    def test_blank_title_keeps_stored_book(self, admin_client):
        book_id = _create(admin_client).get_json()["id"]

        response = admin_client.put(f"/books/{book_id}", json={"title": "", "author": "A"})

        assert response.status_code == 400
        assert admin_client.get(f"/books/{book_id}").get_json()["title"] == "Dune"

    def test_user_is_forbidden(self, admin_client, user1_client):
        book_id = _create(admin_client).get_json()["id"]

        response = user1_client.put(f"/books/{book_id}", json={"title": "T", "author": "A"})

        assert response.status_code == 403


class TestDeleteBook:
    def test_admin_deletes_book(self, admin_client):
        book_id = _create(admin_client).get_json()["id"]

        assert admin_client.delete(f"/books/{book_id}").status_code == 204
        assert admin_client.get(f"/books/{book_id}").status_code == 404
        assert admin_client.delete(f"/books/{book_id}").status_code == 404

    def test_book_with_reservations_is_kept(self, admin_client, user1_client):
        book_id = _create(admin_client).get_json()["id"]
        user1_client.post(f"/books/{book_id}/reservations")

        response = admin_client.delete(f"/books/{book_id}")

        assert response.status_code == 409
        assert book_id in response.get_json()["message"]
        assert admin_client.get(f"/books/{book_id}").status_code == 200

    def test_book_with_only_cancelled_reservations_is_kept(self, admin_client, user1_client):
        book_id = _create(admin_client).get_json()["id"]
        location = user1_client.post(f"/books/{book_id}/reservations").headers["Location"]
        user1_client.delete(location)

        assert admin_client.delete(f"/books/{book_id}").status_code == 409

    def test_user_is_forbidden(self, admin_client, user1_client):
        book_id = _create(admin_client).get_json()["id"]

        assert user1_client.delete(f"/books/{book_id}").status_code == 403
