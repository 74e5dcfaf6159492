import pytest
from hypothesis import given, settings, strategies as st

from constants import Messages
from dtos.request import UserCreateRequest, UserUpdateRequest
from exceptions import NotFoundError, ValidationError
from models import User, Book
from services.password_hasher import hash_password, verify_password


def test_create_user_assigns_id_and_hashes_password(make_user, db_session):
    user = make_user(email="a@x.com", password="Abc123")

    assert user.id is not None
    stored = db_session.get(User, user.id)
    assert stored.password != "Abc123"
    assert verify_password("Abc123", stored.password)


def test_create_user_rejects_first_failing_rule(user_service, db_session):
    request = UserCreateRequest(first_name="Ann", last_name="", email="", password="")

    with pytest.raises(ValidationError) as exc:
        user_service.create_user(request)

    assert exc.value.message == Messages.LAST_NAME_REQUIRED
    assert db_session.query(User).count() == 0


def test_create_user_rejects_duplicate_email(make_user):
    make_user(email="a@x.com")

    with pytest.raises(ValidationError) as exc:
        make_user(email="a@x.com", first_name="Bob")

    assert exc.value.message == Messages.EMAIL_EXISTS


def test_duplicate_email_rejected_by_store_when_check_races(make_user, user_service, monkeypatch, db_session):
    make_user(email="a@x.com")
    # Simulate a concurrent creation that passed the lookup before the first commit
    monkeypatch.setattr(user_service.user_repo, "email_taken", lambda email: False)

    with pytest.raises(ValidationError) as exc:
        make_user(email="a@x.com")

    assert exc.value.message == Messages.EMAIL_EXISTS
    assert db_session.query(User).count() == 1


def test_list_and_find_users(make_user, user_service):
    first = make_user()
    second = make_user(first_name="Bob")

    assert [u.id for u in user_service.list_users()] == [first.id, second.id]
    assert user_service.find_user(second.id).first_name == "Bob"
    assert user_service.find_user(9999) is None


def test_update_user_changes_only_non_empty_fields(make_user, user_service):
    user = make_user(first_name="Ann", last_name="Lee", email="a@x.com")

    updated = user_service.update_user(
        user.id, UserUpdateRequest(first_name="", last_name="X")
    )

    assert updated.first_name == "Ann"
    assert updated.last_name == "X"
    assert updated.email == "a@x.com"


def test_update_user_does_not_touch_password(make_user, user_service, db_session):
    user = make_user()
    before = db_session.get(User, user.id).password

    user_service.update_user(user.id, UserUpdateRequest(email="new@x.com"))

    assert db_session.get(User, user.id).password == before


def test_update_user_requires_body(make_user, user_service):
    user = make_user()

    with pytest.raises(ValidationError) as exc:
        user_service.update_user(user.id, None)

    assert exc.value.message == Messages.USER_DATA_NULL


def test_update_missing_user(user_service):
    with pytest.raises(NotFoundError) as exc:
        user_service.update_user(42, UserUpdateRequest(first_name="X"))

    assert exc.value.message == Messages.USER_NOT_FOUND


def test_update_to_taken_email_is_rejected(make_user, user_service):
    make_user(email="a@x.com")
    other = make_user(email="b@x.com")

    with pytest.raises(ValidationError) as exc:
        user_service.update_user(other.id, UserUpdateRequest(email="a@x.com"))

    assert exc.value.message == Messages.EMAIL_EXISTS
    assert user_service.find_user(other.id).email == "b@x.com"


def test_delete_user_cascades_books(make_user, make_book, user_service, book_service, db_session):
    owner = make_user()
    keeper = make_user()
    make_book(owner.id, title="One")
    make_book(owner.id, title="Two")
    kept = make_book(keeper.id, title="Kept")
    owner_id = owner.id

    deleted = user_service.delete_user(owner_id)

    assert deleted.first_name == "Ann"
    assert db_session.query(Book).filter(Book.user_id == owner_id).count() == 0
    assert [b.id for b in db_session.query(Book).all()] == [kept.id]
    with pytest.raises(NotFoundError):
        book_service.list_books_by_user(owner_id)


def test_delete_missing_user(user_service):
    with pytest.raises(NotFoundError):
        user_service.delete_user(1)


def test_get_user_with_books(make_user, make_book, user_service):
    user = make_user()
    make_book(user.id, title="One")
    make_book(user.id, title="Two")

    found, books = user_service.get_user_with_books(user.id)

    assert found.id == user.id
    assert [b.title for b in books] == ["One", "Two"]


def test_get_user_with_books_missing(user_service):
    with pytest.raises(NotFoundError):
        user_service.get_user_with_books(3)


@settings(max_examples=10, deadline=None)
@given(password=st.text(alphabet="abcXYZ0189", min_size=6, max_size=60).filter(
    lambda p: any(c.isupper() for c in p) and any(c.isdigit() for c in p)
))
def test_hash_never_equals_plaintext(password):
    password_hash = hash_password(password, rounds=4)

    assert password_hash != password
    assert verify_password(password, password_hash)
    assert not verify_password(password + "x", password_hash)


def test_verify_password_rejects_non_bcrypt_value():
    assert verify_password("Abc123", "not-a-hash") is False
