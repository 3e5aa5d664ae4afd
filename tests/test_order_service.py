"""Service-level tests for the cart-to-order transition."""

from decimal import Decimal

import pytest

from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel
from app.domain.errors import ConflictError, EmptyCartError, NotFoundError, ValidationError
from app.repos.cart_repo import CartRepo
from app.services.cart_service import CartService
from app.services.order_service import OrderService
from conftest import make_product


class TestPlaceOrderService:
    def test_total_is_sum_of_snapshot_prices(self, db_session, customer):
        a = make_product(db_session, name="A", price="0.10")
        b = make_product(db_session, name="B", price="0.20")
        carts = CartService(db_session)
        carts.add_item(customer.id, a.id, 3)
        carts.add_item(customer.id, b.id, 1)

        order = OrderService(db_session).place_order(customer.id)

        assert order.total_amount == Decimal("0.50")
        assert sum(i.price * i.quantity for i in order.items) == order.total_amount
        assert len(order.items) == 2

    def test_empty_cart_raises(self, db_session, customer):
        CartService(db_session).get_or_create_cart(customer.id)

        with pytest.raises(EmptyCartError):
            OrderService(db_session).place_order(customer.id)

    def test_empty_cart_is_a_validation_error(self):
        assert issubclass(EmptyCartError, ValidationError)
        assert EmptyCartError().status_code == 400

    def test_no_cart_raises(self, db_session, customer):
        with pytest.raises(EmptyCartError):
            OrderService(db_session).place_order(customer.id)

    def test_cart_version_is_bumped(self, db_session, customer):
        product = make_product(db_session)
        carts = CartService(db_session)
        carts.add_item(customer.id, product.id, 1)
        before = carts.get_or_create_cart(customer.id).version

        OrderService(db_session).place_order(customer.id)

        assert carts.get_or_create_cart(customer.id).version == before + 1

    def test_get_order_is_scoped_to_user(self, db_session, customer, other_customer):
        product = make_product(db_session)
        CartService(db_session).add_item(customer.id, product.id, 1)
        order = OrderService(db_session).place_order(customer.id)

        with pytest.raises(NotFoundError):
            OrderService(db_session).get_order(order.id, other_customer.id)


class TestConcurrentPlacement:
    def test_lost_version_check_rolls_back(self, db_session, customer, monkeypatch):
        product = make_product(db_session)
        CartService(db_session).add_item(customer.id, product.id, 2)

        # rownolegle zlozenie zdazylo podbic wersje koszyka
        monkeypatch.setattr(CartRepo, "update_cart_version", lambda self, cart_id, old_version, new_data: 0)

        with pytest.raises(ConflictError):
            OrderService(db_session).place_order(customer.id)

        assert db_session.query(OrderModel).count() == 0
        items = db_session.query(CartItemModel).all()
        assert [(i.product_id, i.quantity) for i in items] == [(product.id, 2)]

    def test_lost_version_check_is_409(self, client, db_session, customer, customer_headers, monkeypatch):
        product = make_product(db_session)
        client.post("/api/cart/add", json={"product_id": product.id, "quantity": 1}, headers=customer_headers)
        monkeypatch.setattr(CartRepo, "update_cart_version", lambda self, cart_id, old_version, new_data: 0)

        response = client.post("/api/orders", headers=customer_headers)
        assert response.status_code == 409
        assert "error" in response.json()

        monkeypatch.undo()
        assert client.get("/api/orders", headers=customer_headers).json() == []
        assert len(client.get("/api/cart", headers=customer_headers).json()["items"]) == 1

class TestCartService:
    def test_add_item_validates_quantity_type(self, db_session, customer):
        product = make_product(db_session)

        with pytest.raises(ValidationError):
            CartService(db_session).add_item(customer.id, product.id, True)

    def test_get_or_create_is_idempotent(self, db_session, customer):
        carts = CartService(db_session)
        assert carts.get_or_create_cart(customer.id).id == carts.get_or_create_cart(customer.id).id
