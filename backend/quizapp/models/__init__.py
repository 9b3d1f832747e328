from .user import User
from .question import Question
from .result import Result

__all__ = [
    "User",
    "Question",
    "Result"
]
