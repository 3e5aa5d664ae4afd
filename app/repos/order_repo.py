# app/repos/order_repo.py
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel


def _with_items(stmt):
    return stmt.options(
        selectinload(OrderModel.items).selectinload(OrderItemModel.product)
    ).execution_options(populate_existing=True)


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.execute(
            _with_items(select(OrderModel).where(OrderModel.id == order_id))
        ).scalar_one_or_none()

    def get_user_order(self, order_id: int, user_id: int) -> OrderModel | None:
        return self.db.execute(
            _with_items(
                select(OrderModel).where(
                    OrderModel.id == order_id,
                    OrderModel.user_id == user_id,
                )
            )
        ).scalar_one_or_none()

    def list_orders(self, user_id: int | None = None, status: str | None = None) -> list[OrderModel]:
        stmt = select(OrderModel)
        if user_id is not None:
            stmt = stmt.where(OrderModel.user_id == user_id)
        if status:
            stmt = stmt.where(OrderModel.status == status)
        stmt = stmt.order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        return list(self.db.execute(_with_items(stmt)).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count(OrderModel.id))).scalar_one()

    def revenue(self) -> Decimal:
        total = self.db.execute(
            select(func.coalesce(func.sum(OrderModel.total_amount), 0))
        ).scalar_one()
        return Decimal(str(total))

    def update_order_status(self, order_id: int, status: str) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.status = status
            self.db.commit()
            self.db.refresh(order)
        return order

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
