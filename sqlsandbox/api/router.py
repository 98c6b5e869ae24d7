from fastapi import APIRouter
from sqlsandbox.api.endpoints import queries, schema

api_router = APIRouter()

# Combine all sub-routers into one
api_router.include_router(queries.router)
api_router.include_router(schema.router)
