from .auth import LoginRequest, LoginResponse, MessageResponse, UserSummary
from .user import User, UserCreate
from .question import Question, QuestionCreate, QuestionUpdate
from .quiz import QuizScore, QuizSubmission, Result, SubmittedAnswer
__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "UserSummary",
    "User",
    "UserCreate",
    "Question",
    "QuestionCreate",
    "QuestionUpdate",
    "QuizScore",
    "QuizSubmission",
    "Result",
    "SubmittedAnswer"
]
