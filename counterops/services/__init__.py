"""Services Layer — operation dispatch.

Invariants:
    - Services orchestrate core functions around infrastructure calls
    - No HTTP or environment parsing here (host surfaces own that)
"""
