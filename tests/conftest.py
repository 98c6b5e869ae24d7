from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlsandbox.main import app
from sqlsandbox.core import models
from sqlsandbox.core.database import Dataset, get_dataset

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

# Ages of the fixture users, in id order
USER_AGES = [18, 25, 31, 45, 30, 67, 22, 40, 19, 33, 50, 29]


# Small deterministic dataset so tests can assert exact rows
@pytest.fixture(scope="session")
def sample_dataset() -> Dataset:
    users = [
        models.User(
            id=i,
            name=f"User {i}",
            email=f"user{i}@example.com",
            age=age,
            created_at=NOW,
        )
        for i, age in enumerate(USER_AGES, start=1)
    ]
    categories = [
        models.Category(id=1, name="Electronics"),
        models.Category(id=2, name="Books"),
    ]
    products = [
        models.Product(
            id=i,
            name=f"Product {i}",
            description=f"Description for product {i}",
            price=10.5 * i,
            category_id=1 + i % 2,
            created_at=NOW,
        )
        for i in range(1, 9)
    ]
    departments = [
        models.Department(id=1, name="Engineering", location="Building A"),
        models.Department(id=2, name="Sales", location="Building C"),
    ]
    employees = [
        models.Employee(
            id=i,
            name=f"Employee {i}",
            email=f"employee{i}@example.com",
            department_id=1 + i % 2,
            salary=40000.0 + i,
            hire_date=NOW,
        )
        for i in range(1, 4)
    ]
    orders = [
        models.Order(
            id=1,
            user_id=2,
            order_date=NOW,
            status=models.OrderStatus.SHIPPED,
            total_amount=120.25,
        ),
        models.Order(
            id=2,
            user_id=5,
            order_date=NOW,
            status=models.OrderStatus.PENDING,
            total_amount=75.0,
        ),
    ]
    order_items = [
        models.OrderItem(id=1, order_id=1, product_id=3, quantity=2, price=20.0),
        models.OrderItem(id=2, order_id=1, product_id=4, quantity=1, price=80.25),
        models.OrderItem(id=3, order_id=2, product_id=1, quantity=5, price=15.0),
    ]
    return Dataset(
        users=users,
        categories=categories,
        products=products,
        departments=departments,
        employees=employees,
        orders=orders,
        order_items=order_items,
    )


@pytest.fixture(scope="session")
def empty_dataset() -> Dataset:
    return Dataset()


# Client wired to the fixture dataset instead of the seeded one
@pytest_asyncio.fixture(scope="function")
async def client(sample_dataset: Dataset):
    app.dependency_overrides[get_dataset] = lambda: sample_dataset

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def empty_client(empty_dataset: Dataset):
    app.dependency_overrides[get_dataset] = lambda: empty_dataset

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
