import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.config import Settings
from app.core.security import get_password_hash, verify_password

from app.api.deps import get_current_token, get_current_user, get_settings
from app.models.user import User, AuthenticationToken
from app.schemas.user import UserCreate, AdminCreate, Token, TokenRefresh, User as UserSchema
from app.utils.auth_tokens import (
    assign_new_auth_token,
    purge_auth_tokens,
    refresh_auth_token,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _create_user(db: Session, body: UserCreate, is_administrator: bool) -> User:
    if db.query(User).filter(User.email == body.email).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )
    user = User(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=get_password_hash(body.password),
        date_of_birth=body.date_of_birth,
        is_administrator=is_administrator,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (administrator=%s)", user.id, is_administrator)
    return user


@router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, db: Session = Depends(get_db)):
    return _create_user(db, body, is_administrator=False)


@router.post("/admin/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def admin_register(
    body: AdminCreate,
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    if body.admin_secret != app_settings.ADMIN_SECRET_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin secret",
        )
    return _create_user(db, body, is_administrator=True)


@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == form_data.username).first()
    if not user or not verify_password(form_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # One live token per login
    purge_auth_tokens(db, user)
    token = assign_new_auth_token(db, user)
    return Token(
        access_token=token.id,
        token_type="bearer",
        expires=token.expires,
        user=UserSchema.model_validate(user),
    )


@router.post("/refresh", response_model=TokenRefresh)
def refresh(
    auth_token: AuthenticationToken = Depends(get_current_token),
    db: Session = Depends(get_db),
):
    token = refresh_auth_token(db, auth_token)
    return TokenRefresh(access_token=token.id, expires=token.expires)


@router.post("/logout", status_code=status.HTTP_200_OK)
def logout(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Drop every token of the current user."""
    removed = purge_auth_tokens(db, current_user)
    return {"message": "Successfully logged out", "revoked_tokens": removed}


@router.get("/me", response_model=UserSchema)
def get_me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's profile."""
    return current_user
