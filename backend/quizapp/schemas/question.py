from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_serializer

from ..utils.timezone import format_utc

OptionMarker = Literal["A", "B", "C", "D"]


class QuestionBase(BaseModel):
    question: str = Field(..., min_length=1)
    option_a: str = Field(..., alias="optionA", min_length=1)
    option_b: str = Field(..., alias="optionB", min_length=1)
    option_c: str = Field(..., alias="optionC", min_length=1)
    option_d: str = Field(..., alias="optionD", min_length=1)
    correct_answer: OptionMarker = Field(..., alias="correctAnswer")

    class Config:
        populate_by_name = True


class QuestionCreate(QuestionBase):
    pass


class QuestionUpdate(BaseModel):
    """Only the fields present in the request body are written."""
    question: Optional[str] = Field(None, min_length=1)
    option_a: Optional[str] = Field(None, alias="optionA", min_length=1)
    option_b: Optional[str] = Field(None, alias="optionB", min_length=1)
    option_c: Optional[str] = Field(None, alias="optionC", min_length=1)
    option_d: Optional[str] = Field(None, alias="optionD", min_length=1)
    correct_answer: Optional[OptionMarker] = Field(None, alias="correctAnswer")

    class Config:
        populate_by_name = True


class Question(QuestionBase):
    id: int
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, value: datetime):
        return format_utc(value)

    class Config:
        from_attributes = True
        populate_by_name = True
