# app/services/product_service.py
from decimal import Decimal, InvalidOperation

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.errors import InternalError, NotFoundError
from app.domain.schemas import ProductFilters, ProductIn
from app.repos.product_repo import ProductRepo, SORT_COLUMNS
from app.utils.settings import ALL_CATEGORIES
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRICE_MAX_EXPONENT = 12


def parse_price(raw: str | None) -> Decimal | None:
    """Cena z query stringa; smieci sa ignorowane, nie odrzucane."""
    if raw is None or raw.strip() == "":
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    if value.is_zero():
        return Decimal("0")
    # 1e999999 czy 1e-999999 przepelnilyby numeric w bazie
    if abs(value.adjusted()) > PRICE_MAX_EXPONENT:
        return None
    return value


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    #query
    def list_products(self, filters: ProductFilters) -> list[ProductModel]:
        category = filters.category
        if category is not None and (category.strip() == "" or category in ALL_CATEGORIES):
            category = None

        sort = filters.sort if filters.sort in SORT_COLUMNS else "created_at"
        # bez jawnego kierunku: najnowsze pierwsze
        descending = filters.order.lower() != "asc"

        return self.repo.search(
            category=category,
            min_price=parse_price(filters.min_price),
            max_price=parse_price(filters.max_price),
            text=(filters.search or "").strip() or None,
            sort=sort,
            descending=descending,
        )

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def list_categories(self) -> list[str]:
        return self.repo.list_categories()

    #commands
    def create_product(self, payload: ProductIn) -> ProductModel:
        product = ProductModel(**payload.model_dump())
        self._commit("create product", new=product)
        logger.info(f"Product {product.id} created")
        return product

    def update_product(self, product_id: int, payload: ProductIn) -> ProductModel:
        product = self.get_product(product_id)

        # pelna podmiana - body niesie cala reprezentacje
        for field, value in payload.model_dump().items():
            setattr(product, field, value)

        self._commit("update product")
        logger.info(f"Product {product_id} updated")
        return product

    def delete_product(self, product_id: int) -> None:
        product = self.get_product(product_id)
        product.soft_delete()
        self._commit("delete product")
        logger.info(f"Product {product_id} soft-deleted")

    def _commit(self, action: str, new: ProductModel | None = None) -> None:
        try:
            if new is not None:
                self.repo.add(new)
            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise InternalError(f"Failed to {action}") from e
