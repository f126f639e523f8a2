import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from store_admin.config import settings
from store_admin.core.auth import identify_request
from store_admin.core.errors import StoreAdminError, Unauthenticated, error_response
from store_admin.database import engine
from store_admin.logging_config import setup_logging
from store_admin.routes import billboard, category, color, order, product, size, store

logger = logging.getLogger(__name__)

MUTATING_METHODS = {"POST", "PATCH", "PUT", "DELETE"}


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Store Admin API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Every error leaves the API as a short plain-text body
    @app.exception_handler(StoreAdminError)
    async def store_admin_error_handler(request: Request, exc: StoreAdminError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Body parsing runs before the handler; identity must still be reported first
        if request.method in MUTATING_METHODS and await identify_request(request) is None:
            return error_response(Unauthenticated())
        logger.info("Rejected request body for %s %s: %s", request.method, request.url.path, exc.errors())
        return PlainTextResponse("Invalid request body", status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    # Store routes first so /api/stores/... is never read as a store id
    app.include_router(store.router, prefix="/api")
    app.include_router(billboard.router, prefix="/api")
    app.include_router(category.router, prefix="/api")
    app.include_router(size.router, prefix="/api")
    app.include_router(color.router, prefix="/api")
    app.include_router(product.router, prefix="/api")
    app.include_router(order.router, prefix="/api")

    @app.get("/health")
    def health():
        """Health check endpoint for Docker health checks"""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {"status": "healthy", "database": "connected"}
        except Exception as e:
            logger.error("Health check failed: %s", e)
            return {"status": "unhealthy", "database": "disconnected"}

    @app.on_event("startup")
    def startup_event():
        # Only create tables automatically in dev, not production
        if settings.env == "development":
            from store_admin.init_db import init

            logger.info("Development mode: creating tables and seed data")
            init()

    return app


app = create_app()
