"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- API: HTTP endpoints (FastAPI routes)
- Server: The ``payments-service`` console script (uvicorn)

Entrypoints translate external requests into service calls
and format responses for the delivery mechanism.
"""
