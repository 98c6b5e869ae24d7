from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Row(BaseModel):
    """
    A single record of an in-memory relation.

    Field declaration order is the column order reported to clients.
    """

    model_config = ConfigDict(frozen=True)


# =========================
# Enums
# =========================
class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# =========================
# Users
# =========================
class User(Row):
    id: int
    name: str
    email: str
    age: int
    created_at: datetime


# =========================
# Catalog
# =========================
class Category(Row):
    id: int
    name: str


class Product(Row):
    id: int
    name: str
    description: str
    price: float
    category_id: int  # -> categories.id
    created_at: datetime


# =========================
# Staff
# =========================
class Department(Row):
    id: int
    name: str
    location: str


class Employee(Row):
    id: int
    name: str
    email: str
    department_id: int  # -> departments.id
    salary: float
    hire_date: datetime


# =========================
# Sales
# =========================
class Order(Row):
    id: int
    user_id: int  # -> users.id
    order_date: datetime
    status: OrderStatus
    total_amount: float


class OrderItem(Row):
    """Line of an order. Its id keeps counting across orders."""

    id: int
    order_id: int  # -> orders.id
    product_id: int  # -> products.id
    quantity: int
    price: float
