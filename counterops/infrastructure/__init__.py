"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - All external calls wrapped with timeout and error mapping
    - No retries: counter operations are not all safe to repeat

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
