"""httpbench — microbenchmark target server and results aggregator.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
