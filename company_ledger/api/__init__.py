"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers
- Security: API key dependency
- Dependencies: Dependency injection setup
- Error handlers: domain error / exception to response envelope mapping
"""
