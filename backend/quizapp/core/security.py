from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from .config import Settings
from .exceptions import InvalidToken, MissingToken


@dataclass(frozen=True)
class TokenIdentity:
    id: int
    username: str


def get_password_hash(password: str, rounds: int = 10) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Unparseable stored hash, or a password past bcrypt's 72 byte limit
        return False


def create_access_token(
    identity: TokenIdentity,
    settings: Settings,
    issued_at: Optional[datetime] = None
) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(hours=settings.access_token_expire_hours)
    payload = {
        "id": identity.id,
        "username": identity.username,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.algorithm)


def verify_token(token: Optional[str], settings: Settings) -> TokenIdentity:
    """Decode a bearer token into the identity it carries.

    Raises MissingToken when there is nothing to check and InvalidToken for a
    bad signature, an expired token or a payload without identity claims.
    """
    if not token:
        raise MissingToken()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise InvalidToken("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidToken()

    user_id = payload.get("id")
    username = payload.get("username")
    if not isinstance(user_id, int) or isinstance(user_id, bool) or not username:
        raise InvalidToken()

    return TokenIdentity(id=user_id, username=username)
