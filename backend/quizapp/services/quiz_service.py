import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from ..core.security import TokenIdentity
from ..models.question import Question
from ..schemas.quiz import SubmittedAnswer
from .question_service import QuestionService
from .result_service import ResultService

logger = logging.getLogger(__name__)

# Ids outside a 32-bit signed integer column can never resolve
MAX_QUESTION_ID = 2 ** 31 - 1


@dataclass
class ScoreCard:
    score: int
    total: int
    percentage: int
    unscored: int


def parse_question_id(raw: Any) -> Optional[int]:
    """Turn a submitted question id into a storable id, or None if it cannot exist."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not (raw.isascii() and raw.isdigit()):
            return None
        raw = int(raw)
    if not isinstance(raw, int) or raw < 1 or raw > MAX_QUESTION_ID:
        return None
    return raw


def compute_percentage(score: int, total: int) -> int:
    """Percentage rounded half up. An empty quiz scores 0."""
    if total <= 0:
        return 0
    return (200 * score + total) // (2 * total)


def score_answers(answers: Sequence[SubmittedAnswer], questions: Dict[int, Question]) -> ScoreCard:
    """Grade answers against already-resolved questions.

    An answer whose question is missing from ``questions`` counts as wrong
    and is reported in ``unscored``; it is never an error.
    """
    score = 0
    unscored = 0
    for item in answers:
        question_id = parse_question_id(item.question_id)
        question = questions.get(question_id) if question_id is not None else None
        if question is None:
            unscored += 1
            continue
        if item.answer is not None and question.correct_answer == item.answer:
            score += 1

    total = len(answers)
    return ScoreCard(
        score=score,
        total=total,
        percentage=compute_percentage(score, total),
        unscored=unscored
    )


class QuizService:
    def __init__(self, db: Session):
        self.db = db
        self.question_service = QuestionService(db)
        self.result_service = ResultService(db)

    def submit(self, identity: TokenIdentity, answers: List[SubmittedAnswer]) -> ScoreCard:
        question_ids = [
            question_id
            for question_id in (parse_question_id(item.question_id) for item in answers)
            if question_id is not None
        ]
        questions = {
            question.id: question
            for question in self.question_service.get_questions_by_ids(question_ids)
        }

        card = score_answers(answers, questions)

        self.result_service.record_result(
            user_id=identity.id,
            score=card.score,
            total=card.total,
            percentage=card.percentage,
            answers=[item.model_dump(by_alias=True) for item in answers]
        )

        if card.unscored:
            logger.warning(
                f"User {identity.username} submitted {card.unscored} answer(s) "
                f"referencing unknown questions"
            )
        logger.info(
            f"User {identity.username} scored {card.score}/{card.total} ({card.percentage}%)"
        )
        return card
