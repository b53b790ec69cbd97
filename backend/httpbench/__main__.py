"""`python -m httpbench` — start the benchmark server."""

from httpbench.server import serve

if __name__ == "__main__":
    serve()
