"""
Company Ledger
==============

Companies and their financial transactions behind an API-key guarded HTTP API.
"""
__version__ = "1.0.0"
