import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sqlsandbox.api.router import api_router
from sqlsandbox.core.config import settings
from sqlsandbox.core.seed import seed_dataset

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# Seed the read-only dataset once, before the first request is served
@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.dataset = seed_dataset(settings)
    yield


app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# One access line per request
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.3f} ms"
    )
    return response


# Include the master router containing all our endpoints
app.include_router(api_router)

if settings.STATIC_DIR and Path(settings.STATIC_DIR).is_dir():
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")


@app.get("/")
async def root():
    return {"message": "Welcome to the SQL Sandbox API"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
