import os

# konfiguracja musi byc ustawiona zanim zaimportujemy cokolwiek z app
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("DEFAULT_ADMIN_PASSWORD", None)

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.data.database import build_engine, get_db, init_db
from app.data.models.product import ProductModel
from app.data.models.user import ROLE_ADMIN, ROLE_CUSTOMER, ROLE_STAFF, UserModel
from app.services.credential_service import CredentialService, hash_password

TEST_SECRET = "test-secret"
PASSWORD = "secret123"


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def application(session_factory):
    from app.main import create_app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fastapi_app = create_app()
    fastapi_app.dependency_overrides[get_db] = override_get_db
    return fastapi_app


@pytest.fixture()
def client(application):
    return TestClient(application)


def make_user(db, email, role=ROLE_CUSTOMER, name="Test User", password=PASSWORD):
    user = UserModel(email=email.lower(), password=hash_password(password), name=name, role=role)
    db.add(user)
    db.commit()
    return user


def make_product(db, name="Chair", price="10.00", category="chairs", description=""):
    product = ProductModel(
        name=name,
        description=description,
        price=Decimal(price),
        category=category,
        image_url="",
    )
    db.add(product)
    db.commit()
    return product


def auth_headers(user):
    token = CredentialService(TEST_SECRET).issue_token(user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def customer(db_session):
    return make_user(db_session, "alice@example.com", name="Alice")


@pytest.fixture()
def other_customer(db_session):
    return make_user(db_session, "bob@example.com", name="Bob")


@pytest.fixture()
def admin(db_session):
    return make_user(db_session, "admin@example.com", role=ROLE_ADMIN, name="Admin")


@pytest.fixture()
def staff(db_session):
    return make_user(db_session, "staff@example.com", role=ROLE_STAFF, name="Staff")


@pytest.fixture()
def customer_headers(customer):
    return auth_headers(customer)


@pytest.fixture()
def other_headers(other_customer):
    return auth_headers(other_customer)


@pytest.fixture()
def admin_headers(admin):
    return auth_headers(admin)
