#!/usr/bin/env python3
"""
CLI entrypoint for ivarith.

Usage:
    ivarith neg "[0, 1)"
    ivarith mul "[1, 2]" "(-1, 3]"
    ivarith div "[1, 2]" "[-2, 4]" --verify
    ivarith union "(-1, 2]" "[2, 4]"
    ivarith classify "[0, +Inf)"
    ivarith contains "[0, 1)" 1

Returns:
    0: OK
    1: division reported DivByZero or DisjointUnion
    2: --verify could not prove the result encloses the exact result
    3: Error (bad interval notation, bad arguments)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .errors import IntervalError
from .interval import Interval

ARITH_COMMANDS = ("add", "sub", "mul", "div")
SET_COMMANDS = ("intersect", "union", "hull")

EXIT_OK = 0
EXIT_DIV_ERROR = 1
EXIT_UNVERIFIED = 2
EXIT_ERROR = 3


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with the CLI's error code."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_ERROR, f"{self.prog}: error: {message}\n")


# ── Shared arguments ────────────────────────────────────────────────────────

def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .ivarith.yml config file (default: auto-detect in the working directory)",
    )


def _add_verify_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check with Z3 that the result encloses the exact result",
    )
    parser.add_argument(
        "--check-attained",
        action="store_true",
        help="With --verify, also check that closed result bounds are attained",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Z3 timeout per query in milliseconds (default: from config, else 5000)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ivarith",
        description="ivarith: floating-point interval arithmetic with open and closed endpoints",
    )
    sub = parser.add_subparsers(dest="command", required=True, parser_class=_ArgumentParser)

    p = sub.add_parser("neg", help="Negate an interval")
    p.add_argument("x", help="Interval, e.g. '[0, 1)'")
    _add_verify_arguments(p)
    _add_common_arguments(p)

    for name in ARITH_COMMANDS:
        p = sub.add_parser(name, help=f"Interval {name}")
        p.add_argument("x", help="Left operand")
        p.add_argument("y", help="Right operand")
        _add_verify_arguments(p)
        _add_common_arguments(p)

    for name in SET_COMMANDS:
        p = sub.add_parser(name, help=f"Interval {name}")
        p.add_argument("x", help="Left operand")
        p.add_argument("y", help="Right operand")
        _add_common_arguments(p)

    p = sub.add_parser("classify", help="Sign class of an interval")
    p.add_argument("x", help="Interval")
    _add_common_arguments(p)

    p = sub.add_parser("contains", help="Whether an interval contains a value")
    p.add_argument("x", help="Interval")
    p.add_argument("value", type=float, help="Value to test")
    _add_common_arguments(p)

    return parser


def _apply_config_defaults(args: argparse.Namespace) -> None:
    """
    Apply .ivarith.yml settings to flags that were not set on the
    command line.
    """
    from .config import IvarithConfig

    if args.config:
        cfg = IvarithConfig.load_file(args.config)
    else:
        cfg = IvarithConfig.load(Path.cwd())

    if not args.verbose and cfg.output.verbose:
        args.verbose = True
    if hasattr(args, "timeout_ms") and args.timeout_ms is None:
        args.timeout_ms = cfg.verify.timeout_ms
    if hasattr(args, "check_attained") and not args.check_attained:
        args.check_attained = cfg.verify.check_attained


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


# ── Subcommand handlers ─────────────────────────────────────────────────────

def _handle_arith(args: argparse.Namespace, x: Interval, y: Optional[Interval]) -> int:
    from .enclosure import check_attained, check_enclosure, compute

    result, err = compute(args.command, x, y)
    print(result)

    code = EXIT_OK
    if err is not None:
        print(f"error: {err.kind.name.lower()}: {err}")
        code = EXIT_DIV_ERROR

    if args.verify:
        report = check_enclosure(args.command, x, y, result, args.timeout_ms)
        print(f"verify: {report.summary()}")
        if not report.is_proven:
            code = EXIT_UNVERIFIED
        if args.check_attained:
            for side, verdict in check_attained(args.command, x, y, result, args.timeout_ms).items():
                print(f"attained {side}: {verdict.value}")
    return code


def _handle_setop(args: argparse.Namespace, x: Interval, y: Interval) -> int:
    from .setops import hull, intersection, union

    funcs = {"intersect": intersection, "union": union, "hull": hull}
    print(funcs[args.command](x, y))
    return EXIT_OK


def _dispatch(args: argparse.Namespace) -> int:
    from .sign import classify
    from .text import parse

    x = parse(args.x)
    if args.command == "neg":
        return _handle_arith(args, x, None)
    if args.command in ARITH_COMMANDS:
        return _handle_arith(args, x, parse(args.y))
    if args.command in SET_COMMANDS:
        return _handle_setop(args, x, parse(args.y))
    if args.command == "classify":
        print(classify(x).value)
        return EXIT_OK
    if args.command == "contains":
        print(str(x.contains(args.value)).lower())
        return EXIT_OK
    raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _apply_config_defaults(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: config: {e}", file=sys.stderr)
        return EXIT_ERROR

    _configure_logging(args.verbose)

    try:
        return _dispatch(args)
    except IntervalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
