"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create company, create transaction, ...)
- Services: Application services that coordinate multiple use cases
- DTOs: Pydantic request/response models
- Validators: Request-level validation outside the entities
"""
