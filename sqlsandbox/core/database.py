from dataclasses import dataclass
from typing import Dict, Tuple

from fastapi import Request

from sqlsandbox.core import models


# Relation names in the order they are seeded and described
TABLE_NAMES = (
    "users",
    "categories",
    "products",
    "departments",
    "employees",
    "orders",
    "order_items",
)


@dataclass(frozen=True)
class Dataset:
    """
    The seven in-memory relations.

    Built once at startup and never written to afterwards, so any number of
    requests can read it at the same time.
    """

    users: Tuple[models.User, ...] = ()
    categories: Tuple[models.Category, ...] = ()
    products: Tuple[models.Product, ...] = ()
    departments: Tuple[models.Department, ...] = ()
    employees: Tuple[models.Employee, ...] = ()
    orders: Tuple[models.Order, ...] = ()
    order_items: Tuple[models.OrderItem, ...] = ()

    def __post_init__(self):
        # Accept any sequence but always store tuples
        for name in TABLE_NAMES:
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def table(self, name: str) -> Tuple[models.Row, ...]:
        if name not in TABLE_NAMES:
            raise KeyError(f"Unknown table: {name}")
        return getattr(self, name)

    def counts(self) -> Dict[str, int]:
        return {name: len(getattr(self, name)) for name in TABLE_NAMES}


# This is the "Bridge" that gives my routes access to the seeded dataset
def get_dataset(request: Request) -> Dataset:
    return request.app.state.dataset
