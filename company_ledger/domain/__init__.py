"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: Company and Transaction, self-validating
- Errors and Result: failure kinds and the Ok/Err values use cases return
- Repository Interfaces: Abstract contracts for data access
"""
