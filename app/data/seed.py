# app/data/seed.py
from sqlalchemy.orm import Session

from app.data.database import SessionLocal
from app.data.models.user import ROLE_ADMIN, UserModel
from app.repos.user_repo import UserRepo
from app.services.credential_service import hash_password
from app.utils.settings import DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_NAME, DEFAULT_ADMIN_PASSWORD
from app.utils.logging import get_logger

logger = get_logger(__name__)


def create_default_admin(
    db: Session,
    email: str = DEFAULT_ADMIN_EMAIL,
    password: str | None = DEFAULT_ADMIN_PASSWORD,
    name: str = DEFAULT_ADMIN_NAME,
) -> UserModel | None:
    # bez hasla w env nie zakladamy konta z domyslnym haslem
    if not password:
        logger.info("DEFAULT_ADMIN_PASSWORD not set, skipping admin bootstrap")
        return None

    repo = UserRepo(db)
    existing = repo.get_by_email(email)
    if existing:
        return existing

    admin = UserModel(
        email=email.lower(),
        password=hash_password(password),
        name=name,
        role=ROLE_ADMIN,
    )
    repo.add(admin)
    repo.commit()
    logger.info(f"Default admin user created: {admin.email}")
    return admin


def seed():
    db = SessionLocal()
    try:
        create_default_admin(db)
    finally:
        db.close()
