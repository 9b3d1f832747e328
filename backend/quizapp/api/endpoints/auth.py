import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.config import Settings
from ...core.database import get_db
from ...core.exceptions import StoreError
from ...schemas.auth import LoginRequest, LoginResponse, MessageResponse
from ...schemas.user import UserCreate
from ...services.auth_service import AuthService
from ..deps import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    auth_service = AuthService(db, settings)
    try:
        auth_service.register(user_data)
    except SQLAlchemyError as e:
        logger.error(f"Registration failed: {e}", exc_info=True)
        raise StoreError("Registration failed")

    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    auth_service = AuthService(db, settings)
    try:
        return auth_service.login(credentials.username, credentials.password)
    except SQLAlchemyError as e:
        logger.error(f"Login failed: {e}", exc_info=True)
        raise StoreError()
