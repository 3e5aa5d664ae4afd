# app/api/routers/admin.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.data.database import get_db
from app.domain.schemas import (
    BlogIn,
    BlogOut,
    DashboardOut,
    MessageOut,
    OrderOut,
    OrderStatusIn,
    UserCreate,
    UserOut,
    UserUpdate,
    VoucherIn,
    VoucherOut,
)
from app.services.admin_service import AdminService
from app.services.blog_service import BlogService
from app.services.order_service import OrderService
from app.services.user_service import UserService
from app.services.voucher_service import VoucherService

# kazdy endpoint panelu wymaga roli ADMIN/STAFF
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/dashboard", response_model=DashboardOut)
def dashboard(db: Session = Depends(get_db)):
    return AdminService(db).dashboard()


# --- Users (pracownicy i klienci) ---

@router.get("/users", response_model=List[UserOut])
def list_users(role: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return UserService(db).list_users(role)


@router.get("/users/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return UserService(db).get_user(user_id)


@router.post("/users", response_model=UserOut, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).create_user(payload)


@router.put("/users/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    return UserService(db).update_user(user_id, payload)


@router.delete("/users/{user_id}", response_model=MessageOut)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    UserService(db).delete_user(user_id)
    return {"message": "User deleted"}


# --- Vouchers ---

@router.get("/vouchers", response_model=List[VoucherOut])
def list_vouchers(db: Session = Depends(get_db)):
    return VoucherService(db).list_vouchers()


@router.get("/vouchers/{voucher_id}", response_model=VoucherOut)
def get_voucher(voucher_id: int, db: Session = Depends(get_db)):
    return VoucherService(db).get_voucher(voucher_id)


@router.post("/vouchers", response_model=VoucherOut, status_code=201)
def create_voucher(payload: VoucherIn, db: Session = Depends(get_db)):
    return VoucherService(db).create_voucher(payload)


@router.put("/vouchers/{voucher_id}", response_model=VoucherOut)
def update_voucher(voucher_id: int, payload: VoucherIn, db: Session = Depends(get_db)):
    return VoucherService(db).update_voucher(voucher_id, payload)


@router.delete("/vouchers/{voucher_id}", response_model=MessageOut)
def delete_voucher(voucher_id: int, db: Session = Depends(get_db)):
    VoucherService(db).delete_voucher(voucher_id)
    return {"message": "Voucher deleted"}


# --- Blogs ---

@router.get("/blogs", response_model=List[BlogOut])
def list_blogs(db: Session = Depends(get_db)):
    return BlogService(db).list_blogs()


@router.get("/blogs/{blog_id}", response_model=BlogOut)
def get_blog(blog_id: int, db: Session = Depends(get_db)):
    return BlogService(db).get_blog(blog_id)


@router.post("/blogs", response_model=BlogOut, status_code=201)
def create_blog(payload: BlogIn, db: Session = Depends(get_db)):
    return BlogService(db).create_blog(payload)


@router.put("/blogs/{blog_id}", response_model=BlogOut)
def update_blog(blog_id: int, payload: BlogIn, db: Session = Depends(get_db)):
    return BlogService(db).update_blog(blog_id, payload)


@router.delete("/blogs/{blog_id}", response_model=MessageOut)
def delete_blog(blog_id: int, db: Session = Depends(get_db)):
    BlogService(db).delete_blog(blog_id)
    return {"message": "Blog deleted"}


# --- Orders ---

@router.get("/orders", response_model=List[OrderOut])
def list_orders(status: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return OrderService(db).list_all_orders(status)


@router.put("/orders/{order_id}/status", response_model=OrderOut)
def update_order_status(order_id: int, payload: OrderStatusIn, db: Session = Depends(get_db)):
    return OrderService(db).update_status(order_id, payload.status)
