from sqlalchemy import Column, Integer, ForeignKey, String, Numeric
from sqlalchemy.orm import relationship

from app.data.database import Base
from app.data.models.mixins import TimestampMixin

STATUS_PENDING = "pending"
ORDER_STATUSES = ("pending", "processing", "shipped", "completed", "cancelled")


class OrderModel(TimestampMixin, Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    status = Column(String(20), nullable=False, default=STATUS_PENDING)
    # suma zamrozonych cen pozycji, liczona raz przy tworzeniu
    total_amount = Column(Numeric(12, 2), nullable=False)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )
