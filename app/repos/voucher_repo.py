from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.voucher import VoucherModel


class VoucherRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_voucher(self, voucher_id: int) -> VoucherModel | None:
        voucher = self.db.get(VoucherModel, voucher_id)
        if voucher and voucher.is_deleted:
            return None
        return voucher

    def get_by_code(self, code: str) -> VoucherModel | None:
        return self.db.execute(
            select(VoucherModel).where(VoucherModel.code == code)
        ).scalar_one_or_none()

    def list_vouchers(self) -> list[VoucherModel]:
        return list(
            self.db.execute(
                select(VoucherModel)
                .where(VoucherModel.deleted_at.is_(None))
                .order_by(VoucherModel.id)
            ).scalars().all()
        )

    def add(self, voucher: VoucherModel) -> VoucherModel:
        self.db.add(voucher)
        self.db.flush()
        return voucher

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
