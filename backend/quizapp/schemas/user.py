from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_serializer

from ..utils.timezone import format_utc


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(..., min_length=1)


class User(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime = Field(..., alias="createdAt")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime):
        return format_utc(value)

    class Config:
        from_attributes = True
        populate_by_name = True
