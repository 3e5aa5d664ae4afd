from decimal import Decimal

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.voucher import VoucherModel
from app.domain.errors import ConflictError, InternalError, NotFoundError, ValidationError
from app.domain.schemas import VoucherIn
from app.repos.voucher_repo import VoucherRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _validate(payload: VoucherIn) -> None:
    if payload.discount_type == "percentage" and payload.discount_value > Decimal("100"):
        raise ValidationError("Percentage discount cannot exceed 100")


class VoucherService:
    """CRUD voucherow. Rabat nie jest nigdzie naliczany - tylko ewidencja kodow."""

    def __init__(self, db: Session):
        self.repo = VoucherRepo(db)

    def list_vouchers(self) -> list[VoucherModel]:
        return self.repo.list_vouchers()

    def get_voucher(self, voucher_id: int) -> VoucherModel:
        voucher = self.repo.get_voucher(voucher_id)
        if not voucher:
            raise NotFoundError("Voucher not found")
        return voucher

    def create_voucher(self, payload: VoucherIn) -> VoucherModel:
        _validate(payload)
        if self.repo.get_by_code(payload.code):
            raise ConflictError("Voucher code already exists")

        voucher = VoucherModel(**payload.model_dump())
        self._save("create voucher", new=voucher)
        logger.info(f"Voucher {voucher.id} ({voucher.code}) created")
        return voucher

    def update_voucher(self, voucher_id: int, payload: VoucherIn) -> VoucherModel:
        voucher = self.get_voucher(voucher_id)
        _validate(payload)

        other = self.repo.get_by_code(payload.code)
        if other and other.id != voucher.id:
            raise ConflictError("Voucher code already exists")

        for field, value in payload.model_dump().items():
            setattr(voucher, field, value)

        self._save("update voucher")
        logger.info(f"Voucher {voucher_id} updated")
        return voucher

    def delete_voucher(self, voucher_id: int) -> None:
        voucher = self.get_voucher(voucher_id)
        voucher.soft_delete()
        self._save("delete voucher")
        logger.info(f"Voucher {voucher_id} soft-deleted")

    def _save(self, action: str, new: VoucherModel | None = None) -> None:
        try:
            if new is not None:
                self.repo.add(new)
            self.repo.commit()
        except IntegrityError as e:
            self.repo.rollback()
            raise ConflictError("Voucher code already exists") from e
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise InternalError(f"Failed to {action}") from e
