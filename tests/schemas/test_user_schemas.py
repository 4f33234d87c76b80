"""User Schemas — shape validation of creation requests.

Invariants:
    - username 3-50, names 1-100, age 1-120, email local@domain.tld
    - All fields required, types strict
    - Response models read core User dataclasses directly
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from user_service.core.domain_types import User, UserId
from user_service.schemas.user import UserCreate, UserResponse


def _valid(**overrides) -> dict:
    body = {
        "username": "alice",
        "email": "alice@x.com",
        "first_name": "Alice",
        "last_name": "Smith",
        "age": 30,
    }
    body.update(overrides)
    return body


def _error_fields(exc: ValidationError) -> set[str]:
    return {str(e["loc"][0]) for e in exc.errors()}


def test_valid_request_accepted():
    req = UserCreate(**_valid())
    assert req.username == "alice"
    assert req.age == 30


# --- username -----------------------------------------------------------------

@pytest.mark.parametrize("username", ["abc", "a" * 50])
def test_username_length_bounds_accepted(username):
    assert UserCreate(**_valid(username=username)).username == username


@pytest.mark.parametrize("username", ["", "ab", "a" * 51])
def test_username_length_bounds_rejected(username):
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(**_valid(username=username))
    assert _error_fields(exc_info.value) == {"username"}


# --- email --------------------------------------------------------------------

@pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@mail.example.org"])
def test_email_shape_accepted(email):
    assert UserCreate(**_valid(email=email)).email == email


@pytest.mark.parametrize(
    "email",
    ["invalid-email", "no-at.example.com", "@x.com", "alice@", "a b@x.com", "a@@x.com", "a@localhost"],
)
def test_email_shape_rejected(email):
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(**_valid(email=email))
    assert _error_fields(exc_info.value) == {"email"}


# --- names --------------------------------------------------------------------

@pytest.mark.parametrize("field", ["first_name", "last_name"])
def test_empty_name_rejected(field):
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(**_valid(**{field: ""}))
    assert _error_fields(exc_info.value) == {field}


@pytest.mark.parametrize("field", ["first_name", "last_name"])
def test_name_max_length(field):
    UserCreate(**_valid(**{field: "x" * 100}))
    with pytest.raises(ValidationError):
        UserCreate(**_valid(**{field: "x" * 101}))


# --- age ----------------------------------------------------------------------

@pytest.mark.parametrize("age", [1, 120])
def test_age_bounds_accepted(age):
    assert UserCreate(**_valid(age=age)).age == age


@pytest.mark.parametrize("age", [0, -1, 121, 150])
def test_age_out_of_range_rejected(age):
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(**_valid(age=age))
    assert _error_fields(exc_info.value) == {"age"}


@pytest.mark.parametrize("age", ["30", 30.5, True])
def test_age_must_be_integer(age):
    with pytest.raises(ValidationError):
        UserCreate(**_valid(age=age))


# --- required -----------------------------------------------------------------

@pytest.mark.parametrize(
    "field", ["username", "email", "first_name", "last_name", "age"],
)
def test_every_field_required(field):
    body = _valid()
    del body[field]
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(**body)
    assert _error_fields(exc_info.value) == {field}


def test_multiple_violations_all_reported():
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(**_valid(username="ab", age=0))
    assert _error_fields(exc_info.value) == {"username", "age"}


# --- response -----------------------------------------------------------------

def test_user_response_reads_dataclass():
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    user = User(
        id=UserId(3), username="bob", email="bob@x.com",
        first_name="Bob", last_name="Jones", age=40,
        created_at=now, updated_at=now,
    )
    resp = UserResponse.model_validate(user)
    assert resp.id == 3
    assert resp.created_at == now
    assert set(resp.model_dump()) == {
        "id", "username", "email", "first_name", "last_name",
        "age", "created_at", "updated_at",
    }
