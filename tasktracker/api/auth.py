#tasktracker/api/auth.py
from datetime import timedelta
import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from tasktracker.core.exceptions import UnauthenticatedError
from tasktracker.core.security import create_access_token
from tasktracker.core.settings import settings
from tasktracker.dependencies import get_db, get_current_user
from tasktracker.models.user import User as UserModel
from tasktracker.schemas.auth import Token
from tasktracker.schemas.user import UserCreate, UserRead
from tasktracker.services import user_service

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("TaskTracker.Auth")

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(
    data: UserCreate,
    db: Session = Depends(get_db),
):
    """
    Register a new account. The password is never returned.
    """
    return user_service.register_user(db, data.model_dump())

@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """
    Exchange email (sent as `username`) and password for a bearer token.
    """
    user = user_service.authenticate(db, form_data.username, form_data.password)
    if not user:
        logger.info(f"Failed login for {form_data.username}")
        raise UnauthenticatedError("Incorrect email or password")

    token, _ = create_access_token(
        data={"sub": str(user.id), "role": user.role},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Token(
        access_token=token,
        token_type="bearer",
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )

@router.get("/me", response_model=UserRead)
def get_me(current_user: UserModel = Depends(get_current_user)):
    return current_user
