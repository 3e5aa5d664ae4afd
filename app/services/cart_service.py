from decimal import Decimal
from typing import Dict, Any
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.errors import InternalError, NotFoundError, ValidationError
from app.domain.schemas import ProductOut
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger
from app.utils.retry import conflict_retry
from app.utils.settings import MAX_ITEM_QUANTITY

logger = get_logger(__name__)


def _check_quantity(quantity) -> None:
    # bool to tez int w pythonie - odrzucamy
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValidationError("Quantity must be a positive integer")
    if quantity > MAX_ITEM_QUANTITY:
        raise ValidationError(f"Quantity cannot exceed {MAX_ITEM_QUANTITY}")


class CartService:
    """
    Prosta implementacja cqrs i proste use case dla domeny cart
    commands (add, update, remove) modyfikuja stan
    query (get) tylko odczyt
    jeden koszyk na usera, tworzony przy pierwszym uzyciu
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_or_create_cart(self, user_id: int) -> CartModel:
        cart = self.repo.get_cart_by_user(user_id)
        if cart:
            return cart

        try:
            created = self.repo.create_cart(CartModel(user_id=user_id, version=1))
        except IntegrityError:
            # rownolegle zapytanie zdazylo utworzyc koszyk - bierzemy jego
            self.repo.rollback()
            cart = self.repo.get_cart_by_user(user_id)
            if cart is None:
                raise InternalError("Failed to get cart")
            return cart
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to create cart for user {user_id}: {e}")
            raise InternalError("Failed to get cart") from e

        logger.info(f"Utworzono nowy koszyk {created.id} dla uzytkownika {user_id}")
        return created

    def get_cart(self, user_id: int) -> Dict[str, Any]:
        cart = self.get_or_create_cart(user_id)

        #pobierz produkty z repo i oblicz total po aktualnych cenach
        items = self.repo.get_cart_items(cart.id)
        lines = [
            {
                "id": i.id,
                "product_id": i.product_id,
                "product": ProductOut.model_validate(i.product),
                "quantity": i.quantity,
                "subtotal": i.product.price * i.quantity,
            }
            for i in items
        ]
        total = sum((line["subtotal"] for line in lines), Decimal("0.00"))

        #dict przyksztalcany w jsona
        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "items": lines,
            "total": total,
        }

    #commands
    def add_item(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        _check_quantity(quantity)

        product = self.products.get_product(product_id)
        if not product:
            raise ValidationError(f"Product {product_id} does not exist")

        cart = self.get_or_create_cart(user_id)

        try:
            self._add_or_increment(cart.id, product_id, quantity)
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Blad podczas dodawania produktu: {e}")
            raise InternalError("Failed to add item to cart") from e

        return self.get_cart(user_id)

    @conflict_retry()
    def _add_or_increment(self, cart_id: int, product_id: int, quantity: int) -> None:
        # najpierw atomowy UPDATE quantity = quantity + n, insert tylko gdy nie bylo wiersza
        try:
            if self.repo.increment_item_quantity(cart_id, product_id, quantity, MAX_ITEM_QUANTITY):
                logger.info(f"Produkt {product_id} juz jest w koszyku {cart_id}, zwiekszam ilosc o {quantity}")
            elif self.repo.get_cart_item(cart_id, product_id):
                # wiersz jest, ale suma przekroczylaby limit
                self.repo.rollback()
                raise ValidationError(f"Quantity cannot exceed {MAX_ITEM_QUANTITY}")
            else:
                logger.info(f"Dodaje nowy produkt {product_id} do koszyka {cart_id}")
                self.repo.add_cart_item(
                    CartItemModel(
                        cart_id=cart_id,
                        product_id=product_id,
                        quantity=quantity,
                    )
                )
            self.repo.commit()
        except IntegrityError:
            # rownolegle dodanie tej samej pary (cart, product) wygralo insert - u_cart_product
            self.repo.rollback()
            logger.info(f"Konflikt przy dodawaniu produktu {product_id}, ponawiam jako inkrementacje")
            raise

    def update_item(self, user_id: int, item_id: int, quantity: int) -> Dict[str, Any]:
        _check_quantity(quantity)

        item = self.repo.get_owned_item(item_id, user_id)
        if not item:
            raise NotFoundError("Cart item not found")

        item.quantity = quantity
        try:
            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to update cart item {item_id}: {e}")
            raise InternalError("Failed to update cart item") from e

        logger.info(f"Pozycja {item_id} ma teraz ilosc {quantity}")
        return self.get_cart(user_id)

    def remove_item(self, user_id: int, item_id: int) -> Dict[str, Any]:
        item = self.repo.get_owned_item(item_id, user_id)
        if not item:
            raise NotFoundError("Cart item not found")

        try:
            self.repo.delete_cart_item(item)
            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to remove cart item {item_id}: {e}")
            raise InternalError("Failed to remove item from cart") from e

        logger.info(f"Usunieto pozycje {item_id} z koszyka uzytkownika {user_id}")
        return self.get_cart(user_id)
