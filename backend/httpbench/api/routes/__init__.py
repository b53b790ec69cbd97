"""Route Modules — one file per group of benchmark endpoints.

Invariants:
    - Each module defines its own APIRouter with tags and no prefix
    - Route paths match the benchmark contract exactly (no trailing slashes)
"""
