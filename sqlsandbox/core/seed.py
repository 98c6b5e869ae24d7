import logging
import random
from datetime import datetime, timezone
from typing import List, Optional

from sqlsandbox.core import models
from sqlsandbox.core.config import Settings
from sqlsandbox.core.database import Dataset


# -----------------------------------------------------------------------------
# SEED MODULE - Sample data
# Purpose: Build the fixed relations every query runs against, once per process
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)

CATEGORY_NAMES = [
    "Electronics",
    "Clothing",
    "Books",
    "Home & Kitchen",
    "Sports & Outdoors",
]

DEPARTMENTS = [
    ("Engineering", "Building A"),
    ("Marketing", "Building B"),
    ("Sales", "Building C"),
    ("Human Resources", "Building A"),
    ("Customer Support", "Building D"),
]


def _money(rng: random.Random, low: float, high: float) -> float:
    return round(low + rng.random() * (high - low), 2)


def build_users(rng: random.Random, count: int, now: datetime) -> List[models.User]:
    return [
        models.User(
            id=i,
            name=f"User {i}",
            email=f"user{i}@example.com",
            age=rng.randint(18, 67),
            created_at=now,
        )
        for i in range(1, count + 1)
    ]


def build_categories() -> List[models.Category]:
    return [
        models.Category(id=i, name=name)
        for i, name in enumerate(CATEGORY_NAMES, start=1)
    ]


def build_products(
    rng: random.Random, count: int, category_count: int, now: datetime
) -> List[models.Product]:
    return [
        models.Product(
            id=i,
            name=f"Product {i}",
            description=f"Description for product {i}",
            price=_money(rng, 10, 1000),
            category_id=rng.randint(1, category_count),
            created_at=now,
        )
        for i in range(1, count + 1)
    ]


def build_departments() -> List[models.Department]:
    return [
        models.Department(id=i, name=name, location=location)
        for i, (name, location) in enumerate(DEPARTMENTS, start=1)
    ]


def build_employees(
    rng: random.Random, count: int, department_count: int, now: datetime
) -> List[models.Employee]:
    return [
        models.Employee(
            id=i,
            name=f"Employee {i}",
            email=f"employee{i}@example.com",
            department_id=rng.randint(1, department_count),
            salary=_money(rng, 30000, 100000),
            hire_date=now,
        )
        for i in range(1, count + 1)
    ]


def build_orders(
    rng: random.Random,
    count: int,
    user_count: int,
    product_count: int,
    max_items: int,
    now: datetime,
):
    """
    Build orders together with their line items.

    Every order gets between 1 and max_items items. Item ids keep counting
    across orders instead of restarting at 1.

    Returns:
        (orders, order_items)
    """
    statuses = list(models.OrderStatus)
    orders: List[models.Order] = []
    order_items: List[models.OrderItem] = []

    for i in range(1, count + 1):
        orders.append(
            models.Order(
                id=i,
                user_id=rng.randint(1, user_count),
                order_date=now,
                status=rng.choice(statuses),
                total_amount=_money(rng, 50, 500),
            )
        )

        for _ in range(rng.randint(1, max_items)):
            order_items.append(
                models.OrderItem(
                    id=len(order_items) + 1,
                    order_id=i,
                    product_id=rng.randint(1, product_count),
                    quantity=rng.randint(1, 5),
                    price=_money(rng, 10, 200),
                )
            )

    return orders, order_items


def seed_dataset(config: Settings, now: Optional[datetime] = None) -> Dataset:
    """
    Generate the sample relations.

    Values are random unless config.SEED is set, in which case two calls with
    the same settings produce identical data.

    Args:
        config: Application settings with the relation sizes.
        now: Timestamp stamped on every created_at / hire_date / order_date.

    Example:
        dataset = seed_dataset(settings)
    """
    logger.info("Initializing in-memory database with sample data...")

    rng = random.Random(config.SEED)
    now = now or datetime.now(timezone.utc)

    categories = build_categories()
    departments = build_departments()
    users = build_users(rng, config.USER_COUNT, now)
    products = build_products(rng, config.PRODUCT_COUNT, len(categories), now)
    employees = build_employees(rng, config.EMPLOYEE_COUNT, len(departments), now)
    orders, order_items = build_orders(
        rng,
        config.ORDER_COUNT,
        user_count=max(config.USER_COUNT, 1),
        product_count=max(config.PRODUCT_COUNT, 1),
        max_items=max(config.MAX_ITEMS_PER_ORDER, 1),
        now=now,
    )

    dataset = Dataset(
        users=users,
        categories=categories,
        products=products,
        departments=departments,
        employees=employees,
        orders=orders,
        order_items=order_items,
    )

    counts = dataset.counts()
    logger.info(
        f"Initialized with: {counts['users']} users, {counts['products']} products, "
        f"{counts['orders']} orders, {counts['employees']} employees"
    )
    return dataset
