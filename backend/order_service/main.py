"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from order_service.api.middleware import LoggingMiddleware
from order_service.api.routes import health_router, router
from order_service.config import Settings, get_settings
from order_service.database.allocator import OrderNumberAllocator
from order_service.database.mongodb import MongoDB
from order_service.database.order_store import OrderStore
from order_service.exceptions import (
    MissingFieldError,
    NoMatchError,
    NotFoundError,
    OrderServiceError,
    StoreError,
    UpstreamAuthError,
    ValidationError,
)
from order_service.models.request import ErrorResponse
from order_service.services.account_service import AccountClient
from order_service.services.order_service import OrderService
from order_service.utils.logger import setup_logging

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[OrderServiceError], tuple[int, str]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "Order data not completed/invalid"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "Order not found"),
    NoMatchError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "There's an error when updating order data"),
    StoreError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "There's an error when accessing order data"),
    UpstreamAuthError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Authorization service unavailable"),
}


def _error_status(exc: OrderServiceError) -> tuple[int, str]:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings

    # Startup
    logger.info("Starting application...")
    mongodb = MongoDB(settings)
    account_client = AccountClient.from_settings(settings)
    try:
        await mongodb.connect()

        allocator = OrderNumberAllocator(
            mongodb.orders,
            max_attempts=settings.order_number_max_attempts,
            backoff_base=settings.order_number_backoff_base,
        )
        app.state.mongodb = mongodb
        app.state.account_client = account_client
        app.state.order_service = OrderService(OrderStore(mongodb.orders, allocator))
        logger.info("All connections established")

        yield

    finally:
        # Shutdown
        logger.info("Shutting down application...")
        await account_client.close()
        await mongodb.disconnect()
        logger.info("All connections closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application from an explicit settings value."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Order management service for the e-commerce platform",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Include routers
    app.include_router(health_router)
    app.include_router(router, prefix=settings.api_prefix)

    @app.exception_handler(OrderServiceError)
    async def order_service_exception_handler(request: Request, exc: OrderServiceError) -> JSONResponse:
        """Translate order service errors into JSON responses."""
        status_code, error = _error_status(exc)
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)

        body = ErrorResponse(
            error=error,
            message=f"{error} => {exc}",
            field=exc.field if isinstance(exc, MissingFieldError) else None,
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler."""
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        body = ErrorResponse(error="Internal Server Error", message="An unexpected error occurred")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(exclude_none=True),
        )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
        }

    return app


def main() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
