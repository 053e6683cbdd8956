import logging
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from app.models.user import User, AuthenticationToken
from app.utils.auth_tokens import (
    assign_new_auth_token,
    get_auth_token,
    get_new_expiry,
    is_expired,
    purge_auth_tokens,
    refresh_auth_token,
)

from conftest import as_utc, make_user


def test_new_expiry_is_one_day_ahead():
    expected = datetime.now(timezone.utc) + timedelta(hours=24)
    assert abs(get_new_expiry() - expected) < timedelta(seconds=2)


def test_assign_then_get_returns_token_expiring_in_a_day(db):
    user = make_user(db)
    assign_new_auth_token(db, user)

    token = get_auth_token(db, user)

    assert token is not None
    assert token.user_id == user.id
    expected = datetime.now(timezone.utc) + timedelta(hours=24)
    assert abs(as_utc(token.expires) - expected) < timedelta(seconds=5)


def test_get_without_token_is_absent(db):
    user = make_user(db)
    assert get_auth_token(db, user) is None


def test_get_ignores_other_users_tokens(db):
    owner = make_user(db, email="owner@example.com")
    other = make_user(db, email="other@example.com")
    assign_new_auth_token(db, owner)

    assert get_auth_token(db, other) is None


def test_get_with_several_tokens_returns_one_of_them(db):
    user = make_user(db)
    first = assign_new_auth_token(db, user)
    second = assign_new_auth_token(db, user)

    assert get_auth_token(db, user).id in {first.id, second.id}


def test_purge_removes_only_the_users_tokens(db):
    user = make_user(db, email="owner@example.com")
    other = make_user(db, email="other@example.com")
    assign_new_auth_token(db, user)
    assign_new_auth_token(db, user)
    assign_new_auth_token(db, other)

    assert purge_auth_tokens(db, user) == 2

    assert get_auth_token(db, user) is None
    assert get_auth_token(db, other) is not None
    assert db.query(User).count() == 2


def test_refresh_strictly_increases_expiry(db):
    user = make_user(db)
    token = AuthenticationToken(user_id=user.id, expires=datetime.now(timezone.utc) + timedelta(hours=1))
    db.add(token)
    db.commit()
    before = as_utc(token.expires)

    refresh_auth_token(db, token)

    assert as_utc(token.expires) > before


def test_refresh_of_fresh_token_moves_expiry_forward(db):
    user = make_user(db)
    token = assign_new_auth_token(db, user)
    before = as_utc(token.expires)

    refresh_auth_token(db, token)

    assert as_utc(token.expires) > before


def test_assign_failure_is_logged_and_raised(db, caplog):
    ghost = User(id=uuid.uuid4())

    with caplog.at_level(logging.ERROR, logger="app.utils.auth_tokens"):
        with pytest.raises(IntegrityError):
            assign_new_auth_token(db, ghost)

    assert "Error creating new auth token" in caplog.text
    assert db.query(AuthenticationToken).count() == 0


def test_is_expired(db):
    user = make_user(db)
    past = AuthenticationToken(user_id=user.id, expires=datetime.now(timezone.utc) - timedelta(minutes=1))
    future = AuthenticationToken(user_id=user.id, expires=datetime.now(timezone.utc) + timedelta(minutes=1))
    db.add_all([past, future])
    db.commit()

    assert is_expired(past)
    assert not is_expired(future)
