import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.exceptions import StoreError
from ...core.security import TokenIdentity
from ...schemas.quiz import Result
from ...services.result_service import ResultService
from ..deps import get_current_identity

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Result])
def get_user_results(
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    try:
        return ResultService(db).list_results_for_user(identity.id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load results for user {identity.id}: {e}", exc_info=True)
        raise StoreError("Failed to fetch results")
