# app/services/order_service.py
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel, ORDER_STATUSES, STATUS_PENDING
from app.data.models.order_item import OrderItemModel
from app.domain.errors import (
    ConflictError,
    EmptyCartError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Zamowienie powstaje z koszyka usera, ceny sa zamrazane w chwili zlozenia.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)

    def place_order(self, user_id: int) -> OrderModel:
        """
        Use Case: Tworzenie zamówienia z koszyka.

        1. Blokuje wiersz koszyka i pobiera pozycje z produktami
        2. Zamraza ceny jednostkowe i liczy total
        3. Tworzy zamówienie ze statusem pending
        4. Czysci pozycje koszyka (sam koszyk zostaje)

        Kroki 3-4 ida w jednej transakcji - blad przy czyszczeniu cofa tez zamowienie.
        """
        try:
            cart = self.carts.get_cart_by_user(user_id, for_update=True)
            items = self.carts.get_cart_items(cart.id) if cart else []
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to load cart for user {user_id}: {e}")
            raise InternalError("Failed to create order") from e

        if not items:
            # zwolnij blokade zanim odrzucimy
            self.repo.rollback()
            logger.warning(f"User {user_id} tried to order with an empty cart")
            raise EmptyCartError()

        unavailable = [i.product_id for i in items if i.product.is_deleted]
        if unavailable:
            self.repo.rollback()
            raise ValidationError(f"Products no longer available: {unavailable}")

        # snapshot cen - pozniejsze zmiany w katalogu nie ruszaja zamowienia
        order_items = []
        total = Decimal("0.00")
        for item in items:
            unit_price = Decimal(item.product.price)
            order_items.append(
                OrderItemModel(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=unit_price,
                )
            )
            total += unit_price * item.quantity

        order = OrderModel(
            user_id=user_id,
            status=STATUS_PENDING,
            total_amount=total.quantize(CENT, rounding=ROUND_HALF_UP),
            items=order_items,
        )

        seen_version = cart.version
        try:
            self.repo.add_order(order)
            self.carts.clear_items(cart.id)

            # Optimistic locking - drugie rownolegle zlozenie z tego samego koszyka przegrywa
            rowcount = self.carts.update_cart_version(
                cart_id=cart.id,
                old_version=seen_version,
                new_data={"version": seen_version + 1},
            )
            if rowcount == 0:
                self.repo.rollback()
                logger.warning(f"Concurrent order placement on cart {cart.id}")
                raise ConflictError("Cart was modified by another request")

            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Order placement for user {user_id} rolled back: {e}")
            raise InternalError("Failed to create order") from e

        logger.info(
            f"Order {order.id} created from cart {cart.id}: "
            f"{len(order_items)} items, total {order.total_amount}"
        )
        return self.get_order(order.id, user_id)

    def get_order(self, order_id: int, user_id: int) -> OrderModel:
        """
        Use Case: Pobranie zamówienia (Query).
        Cudze zamowienie = 404, nie zdradzamy ze istnieje.
        """
        order = self.repo.get_user_order(order_id, user_id)

        if not order:
            raise NotFoundError("Order not found")

        return order

    def list_orders(self, user_id: int) -> list[OrderModel]:
        return self.repo.list_orders(user_id=user_id)

    # panel admina

    def list_all_orders(self, status: str | None = None) -> list[OrderModel]:
        return self.repo.list_orders(status=status)

    def update_status(self, order_id: int, status: str) -> OrderModel:
        if status not in ORDER_STATUSES:
            raise ValidationError(f"Unknown order status: {status}")

        if not self.repo.get_order(order_id):
            raise NotFoundError("Order not found")

        try:
            order = self.repo.update_order_status(order_id, status)
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to update order {order_id}: {e}")
            raise InternalError("Failed to update order") from e

        logger.info(f"Order {order_id} status changed to {status}")
        return order
