"""Derive deterministic seeds and seeded strings from the command line.

Usage examples:
    python -m pseudo_random seed '{"world": 3, "tags": ["a", "b"]}'
    python -m pseudo_random seed --raw hello
    python -m pseudo_random hex 16 --seed '"session-42"'
    python -m pseudo_random rand --max 6 --seed 7
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from dotenv import load_dotenv

from pseudo_random.application.services.generator import Generator
from pseudo_random.application.services.seed_policy import to_seed_int
from pseudo_random.config import load_settings
from pseudo_random.domain.errors import PseudoRandomError


_logger = logging.getLogger(__name__)


def _parse_value(text: str | None, *, raw: bool) -> Any:
    if text is None:
        return None
    if raw:
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Value is not valid JSON ({exc.msg}); pass --raw to seed the literal text") from exc


def _parse_bound(text: str | None) -> int | float | None:
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return float(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pseudo-random", description="Deterministic seeds for arbitrary values")
    parser.add_argument("--log-level", default=None, help="Logging level; defaults to PSEUDO_RANDOM_LOG_LEVEL or WARNING")
    commands = parser.add_subparsers(dest="command", required=True)

    seed = commands.add_parser("seed", help="Print the 31-bit seed of a JSON value")
    seed.add_argument("value", help="JSON document to seed")
    seed.add_argument("--raw", action="store_true", help="Treat VALUE as a literal string instead of JSON")
    seed.add_argument("--max-depth", type=int, default=None, help="Maximum container nesting")

    for name, help_text in (
        ("hex", "Print lowercase hexadecimal characters"),
        ("alphabetic", "Print characters from A-Z and a-z"),
        ("alphanumeric", "Print characters from A-Z, a-z and 0-9"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("length", type=int)
        sub.add_argument("--seed", default=None, help="JSON seed value; omitted means null")
        sub.add_argument("--raw", action="store_true", help="Treat --seed as a literal string")

    draw = commands.add_parser("rand", help="Print one draw")
    draw.add_argument("--max", default=None, help="Integer or float upper bound (exclusive)")
    draw.add_argument("--seed", default=None, help="JSON seed value; omitted means null")
    draw.add_argument("--raw", action="store_true", help="Treat --seed as a literal string")
    return parser


def _run(args: argparse.Namespace) -> str:
    if args.command == "seed":
        value = _parse_value(args.value, raw=args.raw)
        return str(to_seed_int(value, max_depth=args.max_depth))

    generator = Generator(_parse_value(args.seed, raw=args.raw))
    if args.command == "rand":
        return str(generator.rand(_parse_bound(args.max)))
    method = getattr(generator, args.command)
    return method(args.length)


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    level_name = str(args.log_level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")

    try:
        output = _run(args)
    except (PseudoRandomError, ValueError, TypeError) as exc:
        _logger.debug("Command failed", extra={"command": args.command}, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
