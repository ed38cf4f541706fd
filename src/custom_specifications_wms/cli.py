"""
Command-line demo for the specification library.

Usage::

    custom-specifications-demo                 # interactive menu
    custom-specifications-demo simple 3        # one simple example
    custom-specifications-demo wms             # every warehouse scenario
    custom-specifications-demo --now 2025-01-15T09:00:00 wms 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import TYPE_CHECKING

import pydantic

from custom_specifications import SpecificationError

from . import scenarios, simple
from .config import WarehouseSettings

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

logger = logging.getLogger("custom_specifications_wms.cli")

EXPLANATION = """\
=== Specification Pattern ===

A specification wraps one business rule in an object with a single
question: is_satisfied_by(candidate) -> bool.

Rules compose into new rules without touching the originals:

  a & b      a.and_(b)      both hold
  a | b      a.or_(b)       either holds
  ~a         a.not_()       a does not hold
  a - b      a.and_not(b)   a holds and b does not
             a.or_not(b)    a holds or b does not

Composites evaluate left to right and stop as soon as the outcome is
known.  where(items, spec) filters any iterable lazily; count(), any(),
all(), first() and single() answer common questions about the matches.

Benefits:
  - each rule is small, named and testable on its own
  - complex policies read like the business language
  - the same rule filters collections and validates single objects
"""

MAIN_MENU = """\
Custom Specifications Demo
  [1] Run all simple examples
  [2] Run all warehouse examples
  [3] Run a specific simple example
  [4] Run a specific warehouse example
  [5] What is the Specification pattern?
  [0] Exit
"""


def _iso_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid ISO-8601 timestamp: {value!r}"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="custom-specifications-demo",
        description="Specification pattern examples over plain values and a warehouse",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--domestic-country",
        default="USA",
        help="Country treated as domestic by the warehouse rules (default: USA)",
    )
    parser.add_argument(
        "--now",
        type=_iso_datetime,
        default=None,
        help="Fix the reference time (ISO-8601, naive values are UTC)",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("menu", help="Interactive menu (default)")

    simple_parser = subparsers.add_parser("simple", help="Run the simple examples")
    simple_parser.add_argument(
        "number",
        nargs="?",
        type=int,
        choices=range(1, len(simple.EXAMPLES) + 1),
        help="Run only this example",
    )

    wms_parser = subparsers.add_parser("wms", help="Run the warehouse examples")
    wms_parser.add_argument(
        "number",
        nargs="?",
        type=int,
        choices=range(1, len(scenarios.SCENARIOS) + 1),
        help="Run only this example",
    )

    subparsers.add_parser("explain", help="Explain the Specification pattern")
    return parser


def run_simple(number: int | None, out: TextIO) -> None:
    if number is None:
        simple.run_all(out)
        return
    title, example = simple.EXAMPLES[number - 1]
    logger.info("Running simple example %d: %s", number, title)
    example(out)


def run_wms(number: int | None, settings: WarehouseSettings, out: TextIO) -> None:
    if number is None:
        scenarios.run_all(settings, out)
        return
    scenarios.run_scenario(number, settings, out)


def _pick(titles: Sequence[str], stdin: TextIO, out: TextIO) -> int | None:
    """Prompt for one of *titles*; ``None`` on end of input or a bad choice."""
    for number, title in enumerate(titles, start=1):
        out.write(f"  [{number}] {title}\n")
    out.write("Select an example: ")
    out.flush()
    line = stdin.readline()
    if not line:
        return None
    choice = line.strip()
    if choice.isdigit() and 1 <= int(choice) <= len(titles):
        return int(choice)
    out.write(f"Invalid choice: {choice!r}\n\n")
    return None


def run_menu(settings: WarehouseSettings, stdin: TextIO, out: TextIO) -> None:
    """Interactive loop; returns on ``0`` or end of input."""
    simple_titles = [title for title, _ in simple.EXAMPLES]
    wms_titles = [title for title, _ in scenarios.SCENARIOS]
    while True:
        out.write(MAIN_MENU)
        out.write("Select an option: ")
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return
        choice = line.strip()
        logger.debug("Menu choice %r", choice)
        if choice == "0":
            out.write("Goodbye!\n")
            return
        if choice == "1":
            run_simple(None, out)
        elif choice == "2":
            run_wms(None, settings, out)
        elif choice == "3":
            number = _pick(simple_titles, stdin, out)
            if number is not None:
                run_simple(number, out)
        elif choice == "4":
            number = _pick(wms_titles, stdin, out)
            if number is not None:
                run_wms(number, settings, out)
        elif choice == "5":
            out.write(EXPLANATION)
        else:
            out.write(f"Invalid choice: {choice!r}\n\n")


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    stdin = stdin or sys.stdin
    out = stdout or sys.stdout
    command = args.command or "menu"
    logger.info("Command: %s", command)

    try:
        settings = WarehouseSettings(
            domestic_country=args.domestic_country, now=args.now
        )
        if command == "simple":
            run_simple(args.number, out)
        elif command == "wms":
            run_wms(args.number, settings, out)
        elif command == "explain":
            out.write(EXPLANATION)
        else:
            run_menu(settings, stdin, out)
    except SpecificationError as exc:
        logger.error("Specification error: %s", exc)
        return 1
    except pydantic.ValidationError as exc:
        logger.error("Invalid input: %s", exc)
        return 1
    return 0
