"""
Lambda Handlers
===============

AWS Lambda entry points sharing the application layer with the HTTP API.
"""
from .company_registration import cors_handler, handler

__all__ = ["handler", "cors_handler"]
