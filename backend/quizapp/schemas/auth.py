from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    id: int
    username: str


class LoginResponse(BaseModel):
    token: str
    user: UserSummary


class MessageResponse(BaseModel):
    message: str
