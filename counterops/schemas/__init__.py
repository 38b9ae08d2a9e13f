"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; operation rules stay in core/
"""
