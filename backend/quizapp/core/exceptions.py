from typing import Dict, Optional

from fastapi import status


class QuizAppError(Exception):
    """Base for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(QuizAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class ConflictError(QuizAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username or email already exists"


class InvalidCredentials(QuizAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid username or password"


class MissingToken(QuizAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class InvalidToken(QuizAppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class NotFound(QuizAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StoreError(QuizAppError):
    default_message = "Server error"
