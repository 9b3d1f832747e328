import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.exceptions import NotFound, StoreError
from ...core.security import TokenIdentity
from ...schemas.user import User
from ...services.user_service import UserService
from ..deps import get_current_identity

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=User)
def read_current_user(
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    try:
        user = UserService(db).get_user_by_id(identity.id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load user {identity.id}: {e}", exc_info=True)
        raise StoreError()

    if not user:
        raise NotFound("User not found")
    return user
