"""API Layer — FastAPI routes, response classes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Handlers are pure functions of their own request
"""
