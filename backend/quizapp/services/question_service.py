from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..core.exceptions import NotFound
from ..models.question import Question
from ..schemas.question import QuestionCreate, QuestionUpdate


class QuestionService:
    def __init__(self, db: Session):
        self.db = db

    def get_question(self, question_id: int) -> Optional[Question]:
        return self.db.query(Question).filter(Question.id == question_id).first()

    def get_questions_by_ids(self, question_ids: Iterable[int]) -> List[Question]:
        ids = set(question_ids)
        if not ids:
            return []
        return self.db.query(Question).filter(Question.id.in_(ids)).all()

    def list_questions(self) -> List[Question]:
        return self.db.query(Question).order_by(Question.id).all()

    def sample_random(self, size: int = 10) -> List[Question]:
        """Up to ``size`` distinct questions in random order; all of them if fewer exist."""
        return (
            self.db.query(Question)
            .order_by(func.random())
            .limit(size)
            .all()
        )

    def create_question(self, question_data: QuestionCreate) -> Question:
        db_question = Question(**question_data.model_dump())
        self.db.add(db_question)
        self.db.commit()
        self.db.refresh(db_question)
        return db_question

    def update_question(self, question_id: int, question_data: QuestionUpdate) -> Question:
        db_question = self.get_question(question_id)
        if not db_question:
            raise NotFound("Question not found")

        update_data = question_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            # An explicit null would violate NOT NULL; treat it as "not supplied"
            if value is not None:
                setattr(db_question, field, value)

        self.db.commit()
        self.db.refresh(db_question)
        return db_question

    def delete_question(self, question_id: int) -> None:
        db_question = self.get_question(question_id)
        if not db_question:
            raise NotFound("Question not found")

        self.db.delete(db_question)
        self.db.commit()
