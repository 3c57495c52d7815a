"""
FastAPI Application Entry Point - Bookstore Service
"""
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from bookstore.config import settings
from bookstore.database import init_db
from bookstore.logging_config import build_logging_config, configure_logging
from bookstore.api import books, customers, orders, health
from bookstore.api.errors import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application: logging, middleware, routers, error handlers"""
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title="Bookstore Service",
        description="Books, customers and orders for a bookstore",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(books.router)
    app.include_router(customers.router)
    app.include_router(orders.router)

    register_exception_handlers(app)

    # Prometheus metrics
    Instrumentator().instrument(app).expose(app)

    @app.on_event("startup")
    def startup_event():
        """Initialize database on startup"""
        logger.info("Starting %s...", settings.SERVICE_NAME)
        init_db()
        logger.info("✓ Database initialized")
        logger.info("✓ %s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)

    @app.on_event("shutdown")
    def shutdown_event():
        """Cleanup on shutdown"""
        logger.info("Shutting down %s...", settings.SERVICE_NAME)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn"""
    uvicorn.run(
        "bookstore.main:app",
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        log_config=build_logging_config(settings.LOG_LEVEL, settings.LOG_FILE)
    )


if __name__ == "__main__":
    run()
