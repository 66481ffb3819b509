"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from company_ledger import __version__
from company_ledger.api.v1 import company_router, transaction_router
from company_ledger.api.v1.error_handlers import register_exception_handlers
from company_ledger.api.v1.security import require_api_key
from company_ledger.core.logging_config import configure_logging
from company_ledger.di.container import get_container

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - CORS middleware configuration
    - Envelope-producing exception handlers
    - API route registration behind the API key dependency
    - Startup/shutdown event handlers for the storage backend

    Returns:
        Configured FastAPI application instance
    """
    application = FastAPI(
        title="Companies API",
        description="Company registry and transaction ledger",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    secured = [Depends(require_api_key)]
    application.include_router(company_router, prefix="/companies", dependencies=secured)
    application.include_router(transaction_router, prefix="/transactions", dependencies=secured)

    @application.on_event("startup")
    async def startup_event():
        """Configure logging and open the storage backend."""
        configure_logging()
        get_container().open()
        logger.info("Companies API started")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Release the storage backend."""
        get_container().close()
        logger.info("Companies API stopped")

    @application.get("/health", tags=["health"])
    async def health():
        """Health check, no API key required."""
        return {
            "status": "ok",
            "service": "Companies API",
            "version": __version__,
        }

    return application


app = create_application()
