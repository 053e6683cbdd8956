from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.db.session import get_db
from app.models.user import User, AuthenticationToken
from app.utils.auth_tokens import is_expired

# The documented tokenUrl is rewritten per application by create_app
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_token(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> AuthenticationToken:
    """Resolve the bearer token to a live AuthenticationToken row."""
    try:
        token_id = UUID(token)
    except ValueError:
        raise _credentials_exception()

    auth_token = db.query(AuthenticationToken).filter(AuthenticationToken.id == token_id).first()
    if not auth_token or is_expired(auth_token):
        raise _credentials_exception()
    return auth_token


def get_current_user(auth_token: AuthenticationToken = Depends(get_current_token)) -> User:
    return auth_token.user


def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_administrator:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator privileges required",
        )
    return current_user
