import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import User, AuthenticationToken

logger = logging.getLogger(__name__)

TOKEN_LIFETIME = timedelta(days=1)


def get_new_expiry() -> datetime:
    """Absolute UTC timestamp one day from now."""
    return datetime.now(timezone.utc) + TOKEN_LIFETIME


def is_expired(token: AuthenticationToken) -> bool:
    expires = token.expires
    # SQLite hands back naive timestamps; they were written as UTC
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    return expires <= datetime.now(timezone.utc)


def purge_auth_tokens(db: Session, user: User) -> int:
    """Delete every token belonging to the user. Returns the number removed."""
    count = (
        db.query(AuthenticationToken)
        .filter(AuthenticationToken.user_id == user.id)
        .delete(synchronize_session="fetch")
    )
    db.commit()
    return count


def assign_new_auth_token(db: Session, user: User) -> AuthenticationToken:
    token = AuthenticationToken(user_id=user.id, expires=get_new_expiry())
    db.add(token)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating new auth token: {e}")
        raise
    db.refresh(token)
    return token


def get_auth_token(db: Session, user: User) -> Optional[AuthenticationToken]:
    """
    Return a token of the user, or None.

    Nothing stops a user from holding several tokens at the store level; in
    that case this returns whichever row the database yields first.
    """
    return (
        db.query(AuthenticationToken)
        .filter(AuthenticationToken.user_id == user.id)
        .first()
    )


def refresh_auth_token(db: Session, token: AuthenticationToken) -> AuthenticationToken:
    """Push the token's expiry to one day from now."""
    token.expires = get_new_expiry()
    db.commit()
    db.refresh(token)
    return token
