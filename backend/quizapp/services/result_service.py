from typing import Any, Dict, List

from sqlalchemy.orm import Session

from ..models.result import Result


class ResultService:
    def __init__(self, db: Session):
        self.db = db

    def record_result(
        self,
        user_id: int,
        score: int,
        total: int,
        percentage: int,
        answers: List[Dict[str, Any]]
    ) -> Result:
        result = Result(
            user_id=user_id,
            score=score,
            total=total,
            percentage=percentage,
            answers=answers
        )
        self.db.add(result)
        self.db.commit()
        self.db.refresh(result)
        return result

    def list_results_for_user(self, user_id: int) -> List[Result]:
        """Newest first."""
        return (
            self.db.query(Result)
            .filter(Result.user_id == user_id)
            .order_by(Result.timestamp.desc(), Result.id.desc())
            .all()
        )
