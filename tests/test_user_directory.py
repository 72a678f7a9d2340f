"""
UserDirectory behavior against a real (in-memory) SQLite store.
"""
import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from user_directory.core.exceptions import (
    AuthenticationError,
    UsernameTakenError,
    UserNotFoundError,
)
from user_directory.models.user import UserModel
from user_directory.schemas.user import RegisterRequest, UpdateProfileRequest, UserRecord
from user_directory.utils import user_directory as user_directory_module


def test_register_assigns_id_and_returns_record(alice):
    assert alice.id == 1
    assert alice.username == "alice"
    assert alice.password == "p1"
    assert alice.email == "a@x.com"
    assert alice.first_name is None
    assert alice.created_at


def test_register_assigns_distinct_ids(directory, alice):
    bob = directory.register(RegisterRequest(username="bob", password="pw"))
    assert bob.id != alice.id


def test_register_duplicate_username_conflicts(directory, alice):
    with pytest.raises(UsernameTakenError) as exc_info:
        directory.register(RegisterRequest(username="alice", password="other"))

    assert exc_info.value.username == "alice"
    assert str(exc_info.value) == "User 'alice' already exists"
    assert directory.count_username("alice") == 1
    # The original record is untouched
    assert directory.authenticate("alice", "p1").id == alice.id


def test_username_uniqueness_is_case_sensitive(directory, alice):
    other = directory.register(RegisterRequest(username="Alice", password="p1"))
    assert other.id != alice.id


def test_register_lost_race_reports_conflict(directory, alice, monkeypatch):
    # Simulate another request inserting between the check and the commit
    counts = iter([0, 1])
    monkeypatch.setattr(directory, "count_username", lambda username: next(counts))

    with pytest.raises(UsernameTakenError):
        directory.register(RegisterRequest(username="alice", password="p2"))

    monkeypatch.undo()
    assert directory.count_username("alice") == 1
    assert directory.fetch_profile(alice.id).password == "p1"


def test_authenticate_success(directory, alice):
    user = directory.authenticate("alice", "p1")
    assert user.id == 1
    assert user.username == "alice"


@pytest.mark.parametrize(
    "username,password",
    [
        ("alice", "wrong"),
        ("alice", "P1"),
        ("Alice", "p1"),
        ("bob", "p1"),
        ("", ""),
    ],
)
def test_authenticate_failure(directory, alice, username, password):
    with pytest.raises(AuthenticationError):
        directory.authenticate(username, password)


def test_fetch_profile(directory, alice):
    assert directory.fetch_profile(alice.id) == alice


def test_fetch_profile_missing(directory):
    with pytest.raises(UserNotFoundError) as exc_info:
        directory.fetch_profile(999)
    assert exc_info.value.user_id == 999


def test_update_profile_overwrites_three_fields(directory, alice):
    updated = directory.update_profile(
        1, UpdateProfileRequest(email="new@x.com", first_name="Alice", last_name="Z")
    )

    assert updated.email == "new@x.com"
    assert updated.first_name == "Alice"
    assert updated.last_name == "Z"
    assert updated.id == alice.id
    assert updated.username == "alice"
    assert updated.password == "p1"
    assert updated.created_at == alice.created_at
    assert directory.fetch_profile(1) == updated


def test_update_profile_clears_omitted_fields(directory):
    user = directory.register(
        RegisterRequest(
            username="carol", password="pw", email="c@x.com", first_name="C", last_name="D"
        )
    )

    updated = directory.update_profile(user.id, UpdateProfileRequest(email="c2@x.com"))

    assert updated.email == "c2@x.com"
    assert updated.first_name is None
    assert updated.last_name is None


def test_update_profile_keeps_login_working(directory, alice):
    directory.update_profile(alice.id, UpdateProfileRequest(email="new@x.com"))
    assert directory.authenticate("alice", "p1").email == "new@x.com"


def test_update_profile_missing(directory):
    with pytest.raises(UserNotFoundError):
        directory.update_profile(999, UpdateProfileRequest(email="x@x.com"))


def test_fetch_profile_id_beyond_integer_range(directory):
    with pytest.raises(UserNotFoundError):
        directory.fetch_profile(2**63)
    with pytest.raises(UserNotFoundError):
        directory.fetch_profile(-(2**63) - 1)


def test_update_profile_id_beyond_integer_range(directory):
    with pytest.raises(UserNotFoundError):
        directory.update_profile(2**63, UpdateProfileRequest(email="x@x.com"))


def test_register_other_integrity_error_propagates(directory, db_session, monkeypatch):
    # A row without created_at violates NOT NULL, not the username index
    def broken_row(candidate, created_at):
        return UserModel(username=candidate.username, password=candidate.password)

    monkeypatch.setattr(user_directory_module, "candidate_to_model", broken_row)

    with pytest.raises(IntegrityError):
        directory.register(RegisterRequest(username="dave", password="pw"))

    assert not db_session.new
    assert not db_session.dirty
    assert directory.count_username("dave") == 0


def test_user_record_requires_created_at():
    with pytest.raises(ValidationError):
        UserRecord(id=1, username="alice", password="p1")
