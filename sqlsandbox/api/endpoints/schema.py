from fastapi import APIRouter

from sqlsandbox.core import registry, schemas

router = APIRouter(prefix="/api", tags=["Schema"])


@router.get("/schema", response_model=schemas.DatabaseSchema)
async def get_schema():
    """Describe every table: columns, types, primary and foreign keys."""
    return registry.get_schema()
