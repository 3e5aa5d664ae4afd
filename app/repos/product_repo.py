# app/repos/product_repo.py
from decimal import Decimal

from sqlalchemy import distinct, func, or_, select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel

SORT_COLUMNS = {
    "price": ProductModel.price,
    "name": ProductModel.name,
    "created_at": ProductModel.created_at,
}


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int, include_deleted: bool = False) -> ProductModel | None:
        product = self.db.get(ProductModel, product_id)
        if product and product.is_deleted and not include_deleted:
            return None
        return product

    def search(
        self,
        category: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        text: str | None = None,
        sort: str = "created_at",
        descending: bool = True,
    ) -> list[ProductModel]:
        stmt = select(ProductModel).where(ProductModel.deleted_at.is_(None))

        if category is not None:
            stmt = stmt.where(ProductModel.category == category)
        if min_price is not None:
            stmt = stmt.where(ProductModel.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(ProductModel.price <= max_price)
        if text:
            pattern = _like_pattern(text)
            stmt = stmt.where(
                or_(
                    ProductModel.name.ilike(pattern, escape="\\"),
                    ProductModel.description.ilike(pattern, escape="\\"),
                )
            )

        column = SORT_COLUMNS[sort]
        # id jako drugi klucz - stabilna kolejnosc przy remisach
        if descending:
            stmt = stmt.order_by(column.desc(), ProductModel.id.desc())
        else:
            stmt = stmt.order_by(column.asc(), ProductModel.id.asc())

        return list(self.db.execute(stmt).scalars().all())

    def list_categories(self) -> list[str]:
        return list(
            self.db.execute(
                select(distinct(ProductModel.category))
                .where(ProductModel.deleted_at.is_(None))
                .order_by(ProductModel.category)
            ).scalars().all()
        )

    def count(self) -> int:
        return self.db.execute(
            select(func.count(ProductModel.id)).where(ProductModel.deleted_at.is_(None))
        ).scalar_one()

    def add(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
