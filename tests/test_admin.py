"""Integration tests for the admin panel endpoints."""

import pytest

from app.data.models.user import UserModel
from conftest import PASSWORD, auth_headers, make_product

ADMIN_ENDPOINTS = [
    "/api/admin/dashboard",
    "/api/admin/users",
    "/api/admin/vouchers",
    "/api/admin/blogs",
    "/api/admin/orders",
]

VOUCHER = {
    "code": "WELCOME10",
    "description": "10% off",
    "discount_type": "percentage",
    "discount_value": 10,
    "min_order_value": 50,
    "max_discount": 20,
    "usage_limit": 100,
}


class TestAdminGate:
    @pytest.mark.parametrize("path", ADMIN_ENDPOINTS)
    def test_without_token_is_401(self, client, path):
        assert client.get(path).status_code == 401

    @pytest.mark.parametrize("path", ADMIN_ENDPOINTS)
    def test_customer_token_is_403(self, client, customer_headers, path):
        response = client.get(path, headers=customer_headers)
        assert response.status_code == 403
        assert response.json() == {"error": "Admin access required"}

    @pytest.mark.parametrize("path", ADMIN_ENDPOINTS)
    def test_admin_token_is_allowed(self, client, admin_headers, path):
        assert client.get(path, headers=admin_headers).status_code == 200

    def test_staff_is_allowed(self, client, staff):
        assert client.get("/api/admin/dashboard", headers=auth_headers(staff)).status_code == 200

    def test_customer_cannot_write(self, client, customer_headers):
        response = client.post("/api/admin/vouchers", json=VOUCHER, headers=customer_headers)
        assert response.status_code == 403


class TestDashboard:
    def test_counts_and_revenue(self, client, db_session, customer, customer_headers, admin_headers):
        chair = make_product(db_session, price="12.50")
        make_product(db_session, name="Lamp")
        client.post("/api/cart/add", json={"product_id": chair.id, "quantity": 2}, headers=customer_headers)
        client.post("/api/orders", headers=customer_headers)

        body = client.get("/api/admin/dashboard", headers=admin_headers).json()
        assert body == {"users": 2, "orders": 1, "products": 2, "revenue": 25.0}

    def test_empty_store_has_zero_revenue(self, client, admin_headers):
        body = client.get("/api/admin/dashboard", headers=admin_headers).json()
        assert body["revenue"] == 0
        assert body["orders"] == 0


class TestUsers:
    def test_list_filtered_by_role(self, client, customer, staff, admin_headers):
        response = client.get("/api/admin/users", params={"role": "STAFF"}, headers=admin_headers)
        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == ["staff@example.com"]

    def test_create_user_hashes_password(self, client, db_session, admin_headers):
        response = client.post(
            "/api/admin/users",
            json={"email": "emp@example.com", "password": PASSWORD, "name": "Emp", "role": "STAFF"},
            headers=admin_headers,
        )
        assert response.status_code == 201
        assert response.json()["role"] == "STAFF"

        stored = db_session.query(UserModel).filter_by(email="emp@example.com").one()
        assert stored.password != PASSWORD

        login = client.post("/auth/login", json={"email": "emp@example.com", "password": PASSWORD})
        assert login.status_code == 200

    def test_create_duplicate_email_is_conflict(self, client, customer, admin_headers):
        response = client.post(
            "/api/admin/users",
            json={"email": "alice@example.com", "password": PASSWORD, "name": "Alice 2"},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_update_keeps_password_when_omitted(self, client, customer, admin_headers):
        response = client.put(
            f"/api/admin/users/{customer.id}",
            json={"email": "alice@example.com", "name": "Alice Cooper", "role": "CUSTOMER"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Alice Cooper"

        login = client.post("/auth/login", json={"email": "alice@example.com", "password": PASSWORD})
        assert login.status_code == 200

    def test_update_changes_password_when_given(self, client, customer, admin_headers):
        client.put(
            f"/api/admin/users/{customer.id}",
            json={"email": "alice@example.com", "name": "Alice", "role": "CUSTOMER", "password": "newpass1"},
            headers=admin_headers,
        )

        assert client.post("/auth/login", json={"email": "alice@example.com", "password": PASSWORD}).status_code == 401
        assert client.post("/auth/login", json={"email": "alice@example.com", "password": "newpass1"}).status_code == 200

    def test_update_to_taken_email_is_conflict(self, client, customer, other_customer, admin_headers):
        response = client.put(
            f"/api/admin/users/{customer.id}",
            json={"email": "bob@example.com", "name": "Alice", "role": "CUSTOMER"},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_delete_is_soft(self, client, db_session, customer, admin_headers):
        response = client.delete(f"/api/admin/users/{customer.id}", headers=admin_headers)
        assert response.status_code == 200

        assert client.get(f"/api/admin/users/{customer.id}", headers=admin_headers).status_code == 404
        emails = [u["email"] for u in client.get("/api/admin/users", headers=admin_headers).json()]
        assert "alice@example.com" not in emails

        db_session.expire_all()
        assert db_session.get(UserModel, customer.id).deleted_at is not None

    def test_missing_user(self, client, admin_headers):
        assert client.get("/api/admin/users/999", headers=admin_headers).status_code == 404


class TestVouchers:
    def test_crud(self, client, admin_headers):
        created = client.post("/api/admin/vouchers", json=VOUCHER, headers=admin_headers)
        assert created.status_code == 201
        voucher = created.json()
        assert voucher["code"] == "WELCOME10"
        assert voucher["used_count"] == 0
        assert voucher["is_active"] is True

        updated = client.put(
            f"/api/admin/vouchers/{voucher['id']}",
            json={**VOUCHER, "discount_value": 15, "is_active": False},
            headers=admin_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["discount_value"] == 15.0
        assert updated.json()["is_active"] is False

        listed = client.get("/api/admin/vouchers", headers=admin_headers).json()
        assert [v["id"] for v in listed] == [voucher["id"]]

        deleted = client.delete(f"/api/admin/vouchers/{voucher['id']}", headers=admin_headers)
        assert deleted.status_code == 200
        assert client.get(f"/api/admin/vouchers/{voucher['id']}", headers=admin_headers).status_code == 404
        assert client.get("/api/admin/vouchers", headers=admin_headers).json() == []

    def test_duplicate_code_is_conflict(self, client, admin_headers):
        client.post("/api/admin/vouchers", json=VOUCHER, headers=admin_headers)

        response = client.post("/api/admin/vouchers", json=VOUCHER, headers=admin_headers)
        assert response.status_code == 409

    def test_unknown_discount_type_is_400(self, client, admin_headers):
        response = client.post(
            "/api/admin/vouchers",
            json={**VOUCHER, "discount_type": "bogo"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_percentage_over_100_is_400(self, client, admin_headers):
        response = client.post(
            "/api/admin/vouchers",
            json={**VOUCHER, "discount_value": 150},
            headers=admin_headers,
        )
        assert response.status_code == 400


class TestAdminOrders:
    def test_list_and_update_status(self, client, db_session, customer_headers, admin_headers):
        chair = make_product(db_session)
        client.post("/api/cart/add", json={"product_id": chair.id, "quantity": 1}, headers=customer_headers)
        order_id = client.post("/api/orders", headers=customer_headers).json()["id"]

        pending = client.get("/api/admin/orders", params={"status": "pending"}, headers=admin_headers).json()
        assert [o["id"] for o in pending] == [order_id]

        response = client.put(
            f"/api/admin/orders/{order_id}/status",
            json={"status": "shipped"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["status"] == "shipped"

        mine = client.get(f"/api/orders/{order_id}", headers=customer_headers).json()
        assert mine["status"] == "shipped"

    def test_unknown_status_is_400(self, client, admin_headers):
        response = client.put("/api/admin/orders/1/status", json={"status": "lost"}, headers=admin_headers)
        assert response.status_code == 400

    def test_missing_order_is_404(self, client, admin_headers):
        response = client.put("/api/admin/orders/999/status", json={"status": "shipped"}, headers=admin_headers)
        assert response.status_code == 404
