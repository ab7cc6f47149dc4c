"""Pydantic Schemas - boundary models for form input and stored records.

Invariants:
    - Schemas describe shape; field rules live in core/validation.py
"""
