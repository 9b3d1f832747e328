from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_serializer

from ..utils.timezone import format_utc


class SubmittedAnswer(BaseModel):
    # Any value is accepted; ids that do not resolve and non-matching answers score as wrong
    question_id: Any = Field(None, alias="questionId")
    answer: Any = None

    class Config:
        populate_by_name = True


class QuizSubmission(BaseModel):
    answers: List[SubmittedAnswer]


class QuizScore(BaseModel):
    score: int
    total: int
    percentage: int
    unscored: int = 0


class Result(BaseModel):
    id: int
    user_id: int = Field(..., alias="userId")
    score: int
    total: int
    percentage: int
    answers: List[Dict[str, Any]]
    timestamp: datetime

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime):
        return format_utc(value)

    class Config:
        from_attributes = True
        populate_by_name = True
