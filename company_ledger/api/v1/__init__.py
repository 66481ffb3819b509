"""
API v1 Package
===============

Version 1 API controllers.
"""
from .company_controller import router as company_router
from .transaction_controller import router as transaction_router

__all__ = ["company_router", "transaction_router"]
