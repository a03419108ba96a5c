import argparse
import json
import logging
import sys
from pathlib import Path

from src.crossval.checker import CrossValidationConfig, CrossValidator
from src.crossval.data_maker import ReferenceDataConfig, write_reference_data
from src.crossval.records import ReferenceFormatError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m src.crossval",
        description="Cross-validate BigInt arithmetic against reference files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Check reference files in a directory")
    check.add_argument("directory", type=Path)
    check.add_argument("--glob", default="data*.txt", help="Reference file pattern")
    check.add_argument("--lenient", action="store_true", help="Compare values only, not formatting")
    check.add_argument("--json", action="store_true", help="Print the report as JSON")

    make = commands.add_parser("make", help="Write reference files computed with Python int")
    make.add_argument("directory", type=Path)
    make.add_argument("--count", type=int, default=5)
    make.add_argument("--digits", type=int, default=100)
    make.add_argument("--seed", type=int, default=None)

    return parser.parse_args(argv)


def run_check(args: argparse.Namespace) -> int:
    config = CrossValidationConfig(file_glob=args.glob, check_formatting=not args.lenient)
    try:
        report = CrossValidator(config).check_directory(args.directory)
    except (ReferenceFormatError, NotADirectoryError) as e:
        logging.getLogger("crossval").error("%s", e)
        return 2

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        for result in report.results:
            print(f"{result.source}: {result.details}")
        print(f"{report.total - len(report.failures)}/{report.total} passed")

    return 0 if report.passed else 1


def run_make(args: argparse.Namespace) -> int:
    config = ReferenceDataConfig(count=args.count, digits=args.digits, seed=args.seed)
    try:
        paths = write_reference_data(args.directory, config)
    except ValueError as e:
        logging.getLogger("crossval").error("%s", e)
        return 2

    for path in paths:
        print(path)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    if args.command == "check":
        return run_check(args)

    return run_make(args)


if __name__ == "__main__":
    sys.exit(main())
