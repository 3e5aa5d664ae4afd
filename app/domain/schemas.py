# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, PlainSerializer
from typing import Annotated, List, Literal, Optional
from decimal import Decimal
from datetime import datetime

from app.utils.settings import MAX_ITEM_QUANTITY


# kwoty w JSON jako liczby, w srodku zawsze Decimal
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

RoleName = Literal["CUSTOMER", "STAFF", "ADMIN"]
OrderStatus = Literal["pending", "processing", "shipped", "completed", "cancelled"]


class MessageOut(BaseModel):
    message: str


# ---------- auth / users ----------

class RegisterIn(BaseModel):
    """Schema dla rejestracji klienta."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    name: str = Field(..., min_length=1, max_length=100)


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    id: int
    email: str
    name: str
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthOut(BaseModel):
    token: str
    user: UserOut


class UserCreate(BaseModel):
    """Schema dla tworzenia uzytkownika przez admina."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    name: str = Field(..., min_length=1, max_length=100)
    role: RoleName = "CUSTOMER"


class UserUpdate(BaseModel):
    """Pelna reprezentacja uzytkownika; brak hasla = haslo bez zmian."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100)
    role: RoleName
    password: Optional[str] = Field(None, min_length=6, max_length=72)


# ---------- catalog ----------

class ProductIn(BaseModel):
    """Schema dla tworzenia i pelnej aktualizacji produktu."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=100)
    image_url: str = ""


class ProductOut(BaseModel):
    id: int
    name: str
    description: str
    price: Money
    category: str
    image_url: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductFilters(BaseModel):
    """Parametry listy produktow. Wartosci sa surowe - serwis sam ignoruje smieci."""

    category: Optional[str] = None
    min_price: Optional[str] = None
    max_price: Optional[str] = None
    search: Optional[str] = None
    sort: str = "created_at"
    order: str = "desc"


# ---------- cart ----------

class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., gt=0, le=MAX_ITEM_QUANTITY, description="Ilość produktu (1..MAX_ITEM_QUANTITY)")


class QuantityIn(BaseModel):
    quantity: int = Field(..., gt=0, le=MAX_ITEM_QUANTITY, description="Nowa ilość (1..MAX_ITEM_QUANTITY)")


class CartItemOut(BaseModel):
    """Schema dla produktu w koszyku (response)."""

    id: int
    product_id: int
    product: Optional[ProductOut] = None
    quantity: int
    subtotal: Money


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: int
    user_id: int
    items: List[CartItemOut]
    total: Money


# ---------- orders ----------

class OrderItemOut(BaseModel):
    id: int
    product_id: int
    product: Optional[ProductOut] = None
    quantity: int
    price: Money

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: int
    status: str
    total_amount: Money
    items: List[OrderItemOut]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderStatusIn(BaseModel):
    status: OrderStatus


# ---------- vouchers ----------

class VoucherIn(BaseModel):
    code: str = Field(..., min_length=1, max_length=50)
    description: str = ""
    discount_type: Literal["percentage", "fixed"]
    discount_value: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    min_order_value: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    max_discount: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    usage_limit: int = Field(0, ge=0)
    used_count: int = Field(0, ge=0)
    expires_at: Optional[datetime] = None
    is_active: bool = True


class VoucherOut(BaseModel):
    id: int
    code: str
    description: str
    discount_type: str
    discount_value: Money
    min_order_value: Money
    max_discount: Money
    usage_limit: int
    used_count: int
    expires_at: Optional[datetime] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------- blogs ----------

class BlogIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    excerpt: str = ""
    content: str = ""
    author: str = Field(..., min_length=1, max_length=100)
    image_url: str = ""
    published: bool = False


class BlogOut(BaseModel):
    id: int
    title: str
    excerpt: str
    content: str
    author: str
    image_url: str
    published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------- admin ----------

class DashboardOut(BaseModel):
    users: int
    orders: int
    products: int
    revenue: Money
