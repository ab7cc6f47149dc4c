"""Core Layer - pure domain logic, no IO, no async, no framework.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: routes orchestrate, core decides)
"""
