# app/services/credential_service.py
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.domain.errors import AuthError, InternalError, ValidationError
from app.utils.settings import BCRYPT_ROUNDS, TOKEN_TTL_HOURS, get_jwt_secret
from app.utils.logging import get_logger

logger = get_logger(__name__)

ALGORITHM = "HS256"


def hash_password(plaintext: str, rounds: int = BCRYPT_ROUNDS) -> str:
    raw = plaintext.encode("utf-8")
    # bcrypt bierze max 72 bajty
    if len(raw) > 72:
        raise ValidationError("Password is too long")
    try:
        hashed = bcrypt.hashpw(raw, bcrypt.gensalt(rounds=rounds))
    except (ValueError, TypeError) as e:
        logger.error(f"Password hashing failed: {e}")
        raise InternalError("Failed to hash password") from e
    return hashed.decode("utf-8")


def verify_password(plaintext: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # zepsuty hash w bazie traktujemy jak zle haslo
        return False


class CredentialService:
    """
    Wydawanie i walidacja tokenow sesji (JWT HS256).
    Token niesie tylko id usera i czas wygasniecia.
    """

    def __init__(self, secret: str | None = None, ttl_hours: int = TOKEN_TTL_HOURS):
        self.secret = secret or get_jwt_secret()
        self.ttl = timedelta(hours=ttl_hours)

    def issue_token(self, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def validate_token(self, token: str) -> int:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthError("Invalid token") from e

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise AuthError("Invalid token") from e
