# cart_api/api/__init__.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from cart_api.api.responses import respond_with_error
from cart_api.api.routers import carts
from cart_api.api.routers.health import router as health_router
from cart_api.data.database import init_db
from cart_api.utils.logging import get_logger

logger = get_logger(__name__)


async def invalid_payload_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path}: {exc.errors()}")
    return respond_with_error(400, "Invalid request payload")


def create_app(init_database: bool = True) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        if init_database:
            init_db()
        yield

    app = FastAPI(
        title="Cart Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(RequestValidationError, invalid_payload_handler)

    app.include_router(health_router)
    app.include_router(carts.router)

    return app
