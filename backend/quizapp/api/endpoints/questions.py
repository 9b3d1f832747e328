import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.config import Settings
from ...core.database import get_db
from ...core.exceptions import NotFound, StoreError
from ...core.security import TokenIdentity
from ...schemas.auth import MessageResponse
from ...schemas.question import Question, QuestionCreate, QuestionUpdate
from ...services.question_service import QuestionService
from ...services.quiz_service import parse_question_id
from ..deps import get_current_identity, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def resolve_path_id(question_id: str) -> int:
    parsed = parse_question_id(question_id)
    if parsed is None:
        raise NotFound("Question not found")
    return parsed


@router.get("/random", response_model=List[Question])
def get_random_questions(
    size: Optional[int] = Query(None, ge=1, le=100),
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Draw a random set of questions for a quiz attempt."""
    try:
        return QuestionService(db).sample_random(size or settings.random_question_count)
    except SQLAlchemyError as e:
        logger.error(f"Failed to sample questions: {e}", exc_info=True)
        raise StoreError("Failed to fetch questions")


@router.get("", response_model=List[Question])
def list_questions(
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    try:
        return QuestionService(db).list_questions()
    except SQLAlchemyError as e:
        logger.error(f"Failed to list questions: {e}", exc_info=True)
        raise StoreError("Failed to fetch questions")


@router.post("", response_model=Question, status_code=status.HTTP_201_CREATED)
def create_question(
    question_data: QuestionCreate,
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    try:
        question = QuestionService(db).create_question(question_data)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create question: {e}", exc_info=True)
        raise StoreError("Failed to create question")

    logger.info(f"Question {question.id} created by {identity.username}")
    return question


@router.put("/{question_id}", response_model=Question)
def update_question(
    question_id: str,
    question_data: QuestionUpdate,
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    parsed_id = resolve_path_id(question_id)
    try:
        question = QuestionService(db).update_question(parsed_id, question_data)
    except SQLAlchemyError as e:
        logger.error(f"Failed to update question {parsed_id}: {e}", exc_info=True)
        raise StoreError("Failed to update question")

    logger.info(f"Question {question.id} updated by {identity.username}")
    return question


@router.delete("/{question_id}", response_model=MessageResponse)
def delete_question(
    question_id: str,
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    parsed_id = resolve_path_id(question_id)
    try:
        QuestionService(db).delete_question(parsed_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete question {parsed_id}: {e}", exc_info=True)
        raise StoreError("Failed to delete question")

    logger.info(f"Question {parsed_id} deleted by {identity.username}")
    return MessageResponse(message="Question deleted successfully")
