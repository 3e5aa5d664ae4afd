from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int, include_deleted: bool = False) -> UserModel | None:
        user = self.db.get(UserModel, user_id)
        if user and user.is_deleted and not include_deleted:
            return None
        return user

    def get_by_email(self, email: str) -> UserModel | None:
        # soft-deleted tez - email zostaje zajety
        return self.db.execute(
            select(UserModel).where(func.lower(UserModel.email) == email.lower())
        ).scalar_one_or_none()

    def list_users(self, role: str | None = None) -> list[UserModel]:
        stmt = select(UserModel).where(UserModel.deleted_at.is_(None))
        if role:
            stmt = stmt.where(UserModel.role == role)
        return list(self.db.execute(stmt.order_by(UserModel.id)).scalars().all())

    def count(self) -> int:
        return self.db.execute(
            select(func.count(UserModel.id)).where(UserModel.deleted_at.is_(None))
        ).scalar_one()

    def add(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
