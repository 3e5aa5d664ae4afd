from sqlalchemy import Column, Index, Integer, String, func

from app.data.database import Base
from app.data.models.mixins import SoftDeleteMixin, TimestampMixin

ROLE_CUSTOMER = "CUSTOMER"
ROLE_STAFF = "STAFF"
ROLE_ADMIN = "ADMIN"
ADMIN_ROLES = (ROLE_STAFF, ROLE_ADMIN)


class UserModel(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_CUSTOMER, index=True)


# email unikalny bez wzgledu na wielkosc liter
Index("u_users_email_lower", func.lower(UserModel.__table__.c.email), unique=True)
