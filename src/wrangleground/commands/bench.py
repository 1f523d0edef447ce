"""Command line interface for running the benchmark.

Generates the benchmark table, checks that all the methods
agree on the result and prints a summary of their timings
using the :mod:`wrangleground.utils.tabulate` module.
"""

import argparse
import logging
import sys

from wrangleground.benchmark import METHODS, run_benchmark
from wrangleground.config import BenchmarkConfig
from wrangleground.errors import WrangleGroundError
from wrangleground.logging_config import setup_logging
from wrangleground.utils import tabulate


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and run the benchmark."""
    parser = argparse.ArgumentParser(
        description="Time the plain, pipeline and pandas approaches on the same task."
    )
    parser.add_argument("--rows", type=int, help="Rows of the generated table (default 100000).")
    parser.add_argument("--repetitions", type=int, help="Runs of each method (default 10).")
    parser.add_argument("--seed", type=int, help="Seed of the generated table (default 42).")
    parser.add_argument("--group", help="Animal whose weight is increased (default Dog).")
    parser.add_argument("--increment", type=float, help="How much the weight is increased (default 7).")
    parser.add_argument(
        "-m",
        "--method",
        action="append",
        dest="methods",
        choices=list(METHODS),
        help="Method to benchmark. Can be provided multiple times, defaults to all of them.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every run.")
    parser.add_argument("--log-file", help="Also write the logs to this file.")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = BenchmarkConfig.resolve(
            cli={
                "rows": args.rows,
                "repetitions": args.repetitions,
                "seed": args.seed,
                "group": args.group,
                "increment": args.increment,
                "methods": args.methods,
            }
        )
        result = run_benchmark(config)
    except WrangleGroundError as e:
        print(f"Benchmark failed, {e}")
        return 1

    print(
        f"{config.rows} rows, {config.repetitions} repetitions, "
        f"+{config.increment:g} to {config.group}, seconds per run:"
    )
    print(tabulate.tabulate(result.summary, precision=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())
