# app/api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_credentials, get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import AuthOut, LoginIn, RegisterIn, UserOut
from app.services.credential_service import CredentialService
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_service(db: Session, credentials: CredentialService):
    return UserService(db, credentials)


@router.post("/register", response_model=AuthOut, status_code=201)
def register(
    payload: RegisterIn,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
):
    user, token = get_service(db, credentials).register(payload)
    return {"token": token, "user": user}


@router.post("/login", response_model=AuthOut)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
):
    user, token = get_service(db, credentials).login(payload)
    return {"token": token, "user": user}


@router.get("/me", response_model=UserOut)
def me(user: UserModel = Depends(get_current_user)):
    return user
