"""httpbench CLI — run the benchmark server or rebuild the results index.

Entry point registered as ``httpbench`` in ``pyproject.toml``::

    [project.scripts]
    httpbench = "httpbench.cli:main"
"""

import argparse
import sys

from httpbench.config import get_settings


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``httpbench`` command."""
    parser = argparse.ArgumentParser(
        prog="httpbench",
        description="httpbench — microbenchmark target server and results aggregator.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- httpbench serve --------------------------------------------------
    subparsers.add_parser(
        "serve",
        help="Start the benchmark server (configured via HTTPBENCH_* env vars)",
    )

    # -- httpbench aggregate ----------------------------------------------
    aggregate_parser = subparsers.add_parser(
        "aggregate", help="Rebuild latest.json files and index.json",
    )
    aggregate_parser.add_argument(
        "--results-dir", default=None, help="Results root (contains frameworks/)",
    )
    aggregate_parser.add_argument(
        "--contract", default=None, help="Path to the benchmark contract.json",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from httpbench.server import serve

        serve(get_settings())
    elif args.command == "aggregate":
        _run_aggregate(args)


def _run_aggregate(args: argparse.Namespace) -> None:
    from httpbench.core.errors import ContractError
    from httpbench.infrastructure.observability import setup_logging
    from httpbench.services.aggregate_results import aggregate_results

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format.value)

    results_dir = args.results_dir or settings.results_dir
    contract_file = args.contract or settings.contract_file
    try:
        index = aggregate_results(results_dir, contract_file)
    except ContractError as exc:
        print(f"httpbench: {exc.message}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Index generated with {len(index.frameworks)} frameworks "
        f"(contract v{index.contract_version})"
    )
