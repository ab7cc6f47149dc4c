"""Infrastructure Layer - in-memory storage and cross-cutting concerns.

Invariants:
    - Infrastructure never decides validity (core/validation.py does)
"""
