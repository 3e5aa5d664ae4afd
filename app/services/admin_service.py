from sqlalchemy.orm import Session

from app.repos.order_repo import OrderRepo
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo


class AdminService:
    def __init__(self, db: Session):
        self.users = UserRepo(db)
        self.orders = OrderRepo(db)
        self.products = ProductRepo(db)

    def dashboard(self) -> dict:
        # przychod = suma wszystkich zamowien, bez wzgledu na status
        return {
            "users": self.users.count(),
            "orders": self.orders.count(),
            "products": self.products.count(),
            "revenue": self.orders.revenue(),
        }
