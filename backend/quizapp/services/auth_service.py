import logging

from sqlalchemy.orm import Session

from ..core.config import Settings
from ..core.exceptions import InvalidCredentials
from ..core.security import TokenIdentity, create_access_token
from ..models.user import User
from ..schemas.auth import LoginResponse, UserSummary
from ..schemas.user import UserCreate
from .user_service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.user_service = UserService(db, bcrypt_rounds=settings.bcrypt_rounds)

    def register(self, user_data: UserCreate) -> User:
        user = self.user_service.create_user(user_data)
        logger.info(f"Registered user {user.username} (id={user.id})")
        return user

    def login(self, username: str, password: str) -> LoginResponse:
        user = self.user_service.authenticate_user(username, password)
        if not user:
            # Same error whether the user is missing or the password is wrong
            logger.info(f"Failed login for username {username!r}")
            raise InvalidCredentials()

        identity = TokenIdentity(id=user.id, username=user.username)
        token = create_access_token(identity, self.settings)
        logger.info(f"User {user.username} logged in")
        return LoginResponse(token=token, user=UserSummary(id=user.id, username=user.username))
