#!/usr/bin/env python3
"""
E2E Suite CLI

Command-line wrapper around pytest for the browser suite:
- Run the suite against a chosen browser and environment
- Print the resolved configuration
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List

import pytest

from .settings import E2EConfig

logger = logging.getLogger(__name__)

TESTS_DIR = Path(__file__).parent.parent / "tests"
BROWSERS = ("chromium", "firefox", "webkit")


def build_pytest_args(args: argparse.Namespace) -> List[str]:
    """Translate CLI options into pytest arguments."""
    pytest_args = [str(Path(args.path) if args.path else TESTS_DIR / "e2e")]

    for browser in args.browser or []:
        pytest_args += ["--browser", browser]
    if args.headed:
        pytest_args.append("--headed")
    if args.slow_mo:
        pytest_args += ["--slowmo", str(args.slow_mo)]
    if args.marker:
        pytest_args += ["-m", args.marker]
    if args.keyword:
        pytest_args += ["-k", args.keyword]

    pytest_args += args.pytest_args
    return pytest_args


def run(args: argparse.Namespace) -> int:
    if args.env:
        os.environ["E2E_ENV"] = args.env
    if args.headed:
        os.environ["E2E_HEADLESS"] = "false"

    pytest_args = build_pytest_args(args)
    logger.info(f"Running pytest {' '.join(pytest_args)}")
    return int(pytest.main(pytest_args))


def show_config(args: argparse.Namespace) -> int:
    if args.env:
        os.environ["E2E_ENV"] = args.env
    print(json.dumps(E2EConfig().to_dict(), indent=2))
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="e2e-kit",
        description="Browser end-to-end suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s run                         Run the whole suite headless
  %(prog)s run --headed -m smoke       Run smoke tests with a visible browser
  %(prog)s run --browser firefox       Run against Firefox
  %(prog)s run -x --maxfail=1          Pass extra options to pytest
  %(prog)s config --env ci             Show the CI configuration
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command")

    # Run command
    run_parser = subparsers.add_parser("run", help="Run the e2e suite")
    run_parser.add_argument("path", nargs="?", help="Test path (default: tests/e2e)")
    run_parser.add_argument(
        "--browser", action="append", choices=BROWSERS, help="Browser engine (repeatable)"
    )
    run_parser.add_argument("--headed", action="store_true", help="Show the browser window")
    run_parser.add_argument("--slow-mo", type=int, default=0, help="Delay between actions (ms)")
    run_parser.add_argument("-m", "--marker", help="Only run tests matching marker expression")
    run_parser.add_argument("-k", "--keyword", help="Only run tests matching keyword expression")
    run_parser.add_argument("--env", help="Configuration environment (e.g. ci)")

    # Config command
    config_parser = subparsers.add_parser("config", help="Show resolved configuration")
    config_parser.add_argument("--env", help="Configuration environment (e.g. ci)")

    return parser


def main(argv: List[str] = None) -> int:
    parser = create_parser()
    args, extra = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    if extra and args.command != "run":
        parser.error(f"unrecognized arguments: {' '.join(extra)}")
    args.pytest_args = extra

    try:
        if args.command == "run":
            return run(args)
        elif args.command == "config":
            return show_config(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted")
        return 130
    except Exception as e:
        print(f"\n❌ Error: {e}")
        return 1
    return 1


if __name__ == "__main__":
    sys.exit(main())
