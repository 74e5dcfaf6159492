import pytest

from constants import Messages


@pytest.fixture
def user_id(client):
    response = client.post(
        "/api/user",
        json={"firstName": "Ann", "lastName": "Lee", "email": "a@x.com", "password": "Abc123"},
    )
    return response.json()["id"]


def _add(client, user_id, **overrides):
    body = {"title": "T", "author": "A", "publicationYear": 2020}
    body.update(overrides)
    return client.post("/api/book", params={"userId": user_id}, json=body)


def _book_ids(client, user_id):
    return [b["id"] for b in client.get(f"/api/book/user/{user_id}").json()]


def test_add_book(client, user_id):
    response = _add(client, user_id)

    assert response.status_code == 200
    assert response.text == "Book added to Ann's collection"


def test_add_book_missing_user(client):
    response = _add(client, 404)

    assert response.status_code == 404
    assert response.text == Messages.USER_NOT_FOUND


def test_add_book_requires_user_id(client):
    response = client.post("/api/book", json={"title": "T", "author": "A", "publicationYear": 2020})

    assert response.status_code == 422
    assert response.headers["content-type"].startswith("text/plain")
    assert "userId" in response.text


def test_add_book_rejects_malformed_year(client, user_id):
    response = _add(client, user_id, publicationYear="soon")

    assert response.status_code == 422
    assert "publicationYear" in response.text


def test_list_books_by_user(client, user_id):
    _add(client, user_id, title="One", rating=4, review="good")
    _add(client, user_id, title="Two")

    response = client.get(f"/api/book/user/{user_id}")

    assert response.status_code == 200
    books = response.json()
    assert [b["title"] for b in books] == ["One", "Two"]
    assert books[0] == {
        "id": books[0]["id"],
        "title": "One",
        "author": "A",
        "publicationYear": 2020,
        "rating": 4,
        "review": "good",
    }


def test_list_books_missing_user(client):
    response = client.get("/api/book/user/9")

    assert response.status_code == 404
    assert response.text == Messages.USER_NOT_FOUND


def test_get_book_returns_full_record(client, user_id):
    _add(client, user_id)
    book_id = _book_ids(client, user_id)[0]

    response = client.get(f"/api/book/{book_id}")

    assert response.status_code == 200
    assert response.json()["userId"] == user_id


def test_get_missing_book(client):
    response = client.get("/api/book/31")

    assert response.status_code == 404
    assert response.text == Messages.BOOK_NOT_FOUND_DETAIL


@pytest.mark.parametrize("rating, status", [(0, 400), (1, 200), (5, 200), (6, 400)])
def test_patch_rating_bounds(client, user_id, rating, status):
    _add(client, user_id)
    book_id = _book_ids(client, user_id)[0]

    response = client.patch(f"/api/book/{book_id}", json={"review": "ok", "rating": rating})

    assert response.status_code == status
    expected = Messages.REVIEW_UPDATED if status == 200 else Messages.RATING_OUT_OF_RANGE
    assert response.text == expected


def test_patch_without_rating_is_rejected(client, user_id):
    _add(client, user_id)
    book_id = _book_ids(client, user_id)[0]

    response = client.patch(f"/api/book/{book_id}", json={"review": "ok"})

    assert response.status_code == 400


def test_patch_missing_book(client):
    response = client.patch("/api/book/77", json={"review": "ok", "rating": 3})

    assert response.status_code == 404
    assert response.text == Messages.BOOK_NOT_FOUND


def test_delete_book_scoped_to_owner(client, user_id):
    other = client.post(
        "/api/user",
        json={"firstName": "Bob", "lastName": "Ray", "email": "b@x.com", "password": "Abc123"},
    ).json()["id"]
    _add(client, user_id, title="Dune")
    book_id = _book_ids(client, user_id)[0]

    wrong_owner = client.delete(f"/api/book/{book_id}/user/{other}")
    assert wrong_owner.status_code == 404
    assert wrong_owner.text == Messages.BOOK_OR_USER_NOT_FOUND

    response = client.delete(f"/api/book/{book_id}/user/{user_id}")
    assert response.status_code == 200
    assert response.text == "The book Dune was deleted successfully"
    assert _book_ids(client, user_id) == []


def test_deleting_user_removes_books(client, user_id):
    _add(client, user_id)
    book_id = _book_ids(client, user_id)[0]

    client.delete(f"/api/user/{user_id}")

    assert client.get(f"/api/book/user/{user_id}").status_code == 404
    assert client.get(f"/api/book/{book_id}").status_code == 404
