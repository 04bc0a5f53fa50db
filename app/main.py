from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from datastore.city_table import build_default_table
from logging_config import configure_logging


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # Load the seed eagerly so a bad seed file fails at startup.
    build_default_table()
    try:
        yield
    finally:
        build_default_table.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="City Temperature Store",
        description="Reference record store serving city temperatures by minimum threshold.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
