from typing import Dict, List, Tuple

from sqlsandbox.core.schemas import (
    ColumnInfo,
    DatabaseSchema,
    ForeignKey,
    ForeignKeyReference,
    TableSchema,
)


# Hand-written description, not derived from the seeded rows.
# (column, type) pairs; the first column of every table is its primary key.
_TABLES: Dict[str, List[Tuple[str, str]]] = {
    "users": [
        ("id", "INTEGER"),
        ("name", "TEXT"),
        ("email", "TEXT"),
        ("age", "INTEGER"),
        ("created_at", "TIMESTAMP"),
    ],
    "categories": [
        ("id", "INTEGER"),
        ("name", "TEXT"),
    ],
    "products": [
        ("id", "INTEGER"),
        ("name", "TEXT"),
        ("description", "TEXT"),
        ("price", "REAL"),
        ("category_id", "INTEGER"),
        ("created_at", "TIMESTAMP"),
    ],
    "departments": [
        ("id", "INTEGER"),
        ("name", "TEXT"),
        ("location", "TEXT"),
    ],
    "employees": [
        ("id", "INTEGER"),
        ("name", "TEXT"),
        ("email", "TEXT"),
        ("department_id", "INTEGER"),
        ("salary", "REAL"),
        ("hire_date", "TIMESTAMP"),
    ],
    "orders": [
        ("id", "INTEGER"),
        ("user_id", "INTEGER"),
        ("order_date", "TIMESTAMP"),
        ("status", "TEXT"),
        ("total_amount", "REAL"),
    ],
    "order_items": [
        ("id", "INTEGER"),
        ("order_id", "INTEGER"),
        ("product_id", "INTEGER"),
        ("quantity", "INTEGER"),
        ("price", "REAL"),
    ],
}

# table -> [(column, referenced table, referenced column)]
_FOREIGN_KEYS: Dict[str, List[Tuple[str, str, str]]] = {
    "products": [("category_id", "categories", "id")],
    "employees": [("department_id", "departments", "id")],
    "orders": [("user_id", "users", "id")],
    "order_items": [
        ("order_id", "orders", "id"),
        ("product_id", "products", "id"),
    ],
}

_PRIMARY_KEY = "id"


def _build_schema() -> DatabaseSchema:
    tables = {}
    for table, columns in _TABLES.items():
        tables[table] = TableSchema(
            columns=[
                ColumnInfo(name=name, type=type_, is_primary=name == _PRIMARY_KEY)
                for name, type_ in columns
            ],
            foreign_keys=[
                ForeignKey(
                    column=column,
                    reference=ForeignKeyReference(table=ref_table, column=ref_column),
                )
                for column, ref_table, ref_column in _FOREIGN_KEYS.get(table, [])
            ],
        )
    return DatabaseSchema(tables=tables)


SCHEMA = _build_schema()


def get_schema() -> DatabaseSchema:
    """Return the static description of every table. Always the same object."""
    return SCHEMA
