# app/api/deps.py
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.user import ADMIN_ROLES, UserModel
from app.domain.errors import AuthError, ForbiddenError
from app.repos.user_repo import UserRepo
from app.services.credential_service import CredentialService


def get_credentials() -> CredentialService:
    return CredentialService()


def get_current_user(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
) -> UserModel:
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthError("Authorization header required")

    token = authorization.split(" ", 1)[1].strip()
    user_id = credentials.validate_token(token)

    user = UserRepo(db).get_user(user_id)
    if not user:
        raise AuthError("User not found")
    return user


def require_admin(user: UserModel = Depends(get_current_user)) -> UserModel:
    if user.role not in ADMIN_ROLES:
        raise ForbiddenError("Admin access required")
    return user
