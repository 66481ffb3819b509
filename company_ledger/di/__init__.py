"""
Dependency Injection
====================

Container and providers wiring storage, repositories and services.
"""
