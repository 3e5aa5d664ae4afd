from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.user import ROLE_CUSTOMER, UserModel
from app.domain.errors import AuthError, ConflictError, InternalError, NotFoundError
from app.domain.schemas import RegisterIn, LoginIn, UserCreate, UserUpdate
from app.repos.user_repo import UserRepo
from app.services.credential_service import CredentialService, hash_password, verify_password
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Konta uzytkownikow: rejestracja, logowanie i CRUD dla panelu admina.
    """

    def __init__(self, db: Session, credentials: CredentialService | None = None):
        self.repo = UserRepo(db)
        self.credentials = credentials

    #commands - auth
    def register(self, payload: RegisterIn) -> tuple[UserModel, str]:
        user = self._create(
            email=str(payload.email),
            password=payload.password,
            name=payload.name,
            role=ROLE_CUSTOMER,
        )
        logger.info(f"Registered user {user.id}")
        return user, self.credentials.issue_token(user.id)

    def login(self, payload: LoginIn) -> tuple[UserModel, str]:
        user = self.repo.get_by_email(str(payload.email))

        # ten sam komunikat niezaleznie od przyczyny
        if not user or user.is_deleted or not verify_password(payload.password, user.password):
            logger.warning(f"Failed login for {payload.email}")
            raise AuthError("Invalid email or password")

        logger.info(f"User {user.id} logged in")
        return user, self.credentials.issue_token(user.id)

    #query
    def get_user(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def list_users(self, role: str | None = None) -> list[UserModel]:
        return self.repo.list_users(role)

    #commands - admin
    def create_user(self, payload: UserCreate) -> UserModel:
        user = self._create(
            email=str(payload.email),
            password=payload.password,
            name=payload.name,
            role=payload.role,
        )
        logger.info(f"Admin created user {user.id} with role {user.role}")
        return user

    def update_user(self, user_id: int, payload: UserUpdate) -> UserModel:
        user = self.get_user(user_id)

        email = str(payload.email).lower()
        other = self.repo.get_by_email(email)
        if other and other.id != user.id:
            raise ConflictError("Email already registered")

        user.email = email
        user.name = payload.name
        user.role = payload.role
        if payload.password:
            user.password = hash_password(payload.password)

        self._commit("update user")
        logger.info(f"User {user.id} updated")
        return user

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        user.soft_delete()
        self._commit("delete user")
        logger.info(f"User {user_id} soft-deleted")

    def _create(self, email: str, password: str, name: str, role: str) -> UserModel:
        email = email.lower()
        if self.repo.get_by_email(email):
            raise ConflictError("Email already registered")

        user = UserModel(
            email=email,
            password=hash_password(password),
            name=name,
            role=role,
        )
        try:
            self.repo.add(user)
            self.repo.commit()
        except IntegrityError as e:
            # wyscig dwoch rejestracji na ten sam email
            self.repo.rollback()
            raise ConflictError("Email already registered") from e
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to create user: {e}")
            raise InternalError("Failed to create user") from e
        return user

    def _commit(self, action: str) -> None:
        try:
            self.repo.commit()
        except IntegrityError as e:
            self.repo.rollback()
            raise ConflictError("Email already registered") from e
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise InternalError(f"Failed to {action}") from e
