from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String

from app.data.database import Base
from app.data.models.mixins import SoftDeleteMixin, TimestampMixin


class VoucherModel(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "vouchers"

    id = Column(Integer, primary_key=True)
    code = Column(String(50), nullable=False, unique=True)
    description = Column(String(500), nullable=False, default="")
    discount_type = Column(String(20), nullable=False)
    discount_value = Column(Numeric(10, 2), nullable=False)
    min_order_value = Column(Numeric(10, 2), nullable=False, default=0)
    max_discount = Column(Numeric(10, 2), nullable=False, default=0)
    usage_limit = Column(Integer, nullable=False, default=0)
    used_count = Column(Integer, nullable=False, default=0)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
