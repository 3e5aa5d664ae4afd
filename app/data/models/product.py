from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String, Text

from app.data.database import Base
from app.data.models.mixins import SoftDeleteMixin, TimestampMixin


class ProductModel(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    image_url = Column(String(500), nullable=False, default="")

    __table_args__ = (CheckConstraint("price >= 0", name="ck_product_price_non_negative"),)
