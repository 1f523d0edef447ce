"""Command line interface for running the lessons.

Runs every snippet of a lesson with the three approaches
and prints the result of each approach, followed by whether
all the approaches agree.
"""

import argparse
import logging
import sys

import pyarrow as pa

from wrangleground.dataframe import Dataframe
from wrangleground.errors import WrangleGroundError
from wrangleground.lessons import LESSONS, results_agree, run_lesson
from wrangleground.logging_config import setup_logging
from wrangleground.sample import SCHEMA, animals_table
from wrangleground.utils import tabulate

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and run the requested lessons."""
    parser = argparse.ArgumentParser(description="Run the lessons of the tutorial.")
    parser.add_argument(
        "lesson",
        nargs="?",
        default="all",
        help=f"The lesson to run: {', '.join(LESSONS)} or all (default).",
    )
    parser.add_argument(
        "--csv",
        help="Run the lessons on a CSV file with animal, weight, height and family columns.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging.")
    parser.add_argument("--log-file", help="Also write the logs to this file.")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    if args.csv:
        log.info("Loading lesson data from %s", args.csv)
        try:
            table = Dataframe.open_csv(args.csv, column_types=SCHEMA).to_arrow().select(SCHEMA.names)
        except (OSError, KeyError, pa.ArrowInvalid) as e:
            print(f"Unable to read {args.csv}, {e}")
            return 1
    else:
        table = animals_table()

    names = list(LESSONS) if args.lesson == "all" else [args.lesson]
    try:
        for name in names:
            print_lesson(name, run_lesson(name, table))
    except (WrangleGroundError, ValueError, pa.ArrowException) as e:
        print(f"Lesson failed, {e}")
        return 1
    return 0


def print_lesson(name: str, results: dict[str, dict[str, pa.Table]]) -> None:
    """Print the result of every approach of every snippet."""
    print(f"= {name}")
    for title, by_approach in results.items():
        print(f"\n== {title}")
        for approach, result in by_approach.items():
            print(f"\n[{approach}]")
            print(tabulate.tabulate(result))
        print(f"\napproaches agree: {'yes' if results_agree(by_approach) else 'NO'}")
    print()


if __name__ == "__main__":
    sys.exit(main())
