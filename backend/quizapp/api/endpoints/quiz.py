import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.exceptions import StoreError
from ...core.security import TokenIdentity
from ...schemas.quiz import QuizScore, QuizSubmission
from ...services.quiz_service import QuizService
from ..deps import get_current_identity

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/submit", response_model=QuizScore)
def submit_quiz(
    submission: QuizSubmission,
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Score the submitted answers and store the attempt.

    ``unscored`` counts answers whose question id did not resolve; they are
    included in ``total`` and count as wrong.
    """
    try:
        card = QuizService(db).submit(identity, submission.answers)
    except SQLAlchemyError as e:
        logger.error(f"Quiz submission failed for user {identity.id}: {e}", exc_info=True)
        raise StoreError("Submission failed")

    return QuizScore(
        score=card.score,
        total=card.total,
        percentage=card.percentage,
        unscored=card.unscored
    )
