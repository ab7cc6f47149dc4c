"""API Layer - FastAPI routes, views and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)

Design Decisions:
    - Thin routes delegate to core (validation, search) and the injected store
"""
