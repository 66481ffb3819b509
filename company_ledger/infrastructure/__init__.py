"""
Infrastructure Layer
====================

Storage backends implementing the domain repository interfaces.

Contains:
- memory: process-lifetime dict storage (default)
- db: MongoDB storage
"""
