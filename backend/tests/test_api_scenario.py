"""
End-to-end walk through the API: create a user, add a book, review it and
read the user back with its books.
"""


def test_create_add_review_and_read_back(client):
    created = client.post(
        "/api/user",
        json={"firstName": "Ann", "lastName": "Lee", "email": "a@x.com", "password": "Abc123"},
    )
    assert created.status_code == 201
    user_id = created.json()["id"]

    added = client.post(
        f"/api/book?userId={user_id}",
        json={"title": "T", "author": "A", "publicationYear": 2020},
    )
    assert added.status_code == 200

    book_id = client.get(f"/api/book/user/{user_id}").json()[0]["id"]
    patched = client.patch(f"/api/book/{book_id}", json={"rating": 3, "review": "ok"})
    assert patched.status_code == 200

    response = client.get(f"/api/user/{user_id}/with-books")

    assert response.status_code == 200
    assert "password" not in response.text
    assert response.json() == {
        "id": user_id,
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "a@x.com",
        "books": [
            {
                "id": book_id,
                "title": "T",
                "author": "A",
                "publicationYear": 2020,
                "rating": 3,
                "review": "ok",
            }
        ],
    }


def test_health_reports_schema(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == {"valid": True, "issues": []}


def test_unknown_route_is_plain_text(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")


def test_request_id_header_round_trips(client):
    response = client.get("/api/user", headers={"X-Request-ID": "req-1"})

    assert response.headers["X-Request-ID"] == "req-1"


def test_openapi_title(client):
    assert client.get("/openapi.json").json()["info"]["title"] == "Book Library API"
