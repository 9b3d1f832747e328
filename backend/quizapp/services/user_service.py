from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import ConflictError, ValidationError
from ..core.security import get_password_hash, verify_password
from ..models.user import User
from ..schemas.user import UserCreate


class UserService:
    def __init__(self, db: Session, bcrypt_rounds: int = 10):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def username_or_email_taken(self, username: str, email: str) -> bool:
        existing = (
            self.db.query(User.id)
            .filter(or_(User.username == username, User.email == email))
            .first()
        )
        return existing is not None

    def create_user(self, user_data: UserCreate) -> User:
        if self.username_or_email_taken(user_data.username, user_data.email):
            raise ConflictError()

        try:
            hashed_password = get_password_hash(user_data.password, self.bcrypt_rounds)
        except ValueError:
            # bcrypt refuses secrets longer than 72 bytes
            raise ValidationError("Password is too long")

        db_user = User(
            username=user_data.username,
            email=user_data.email,
            hashed_password=hashed_password
        )
        self.db.add(db_user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            self.db.rollback()
            raise ConflictError()
        self.db.refresh(db_user)
        return db_user

    def authenticate_user(self, username: str, password: str) -> Optional[User]:
        user = self.get_user_by_username(username)
        if not user or not verify_password(password, user.hashed_password):
            return None
        return user
