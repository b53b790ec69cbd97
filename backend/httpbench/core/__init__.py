"""Core Layer — pure request-parsing logic and the error hierarchy, no IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic
"""
