"""passgen command-line interface.

Usage examples:
    python -m passgen generate
    python -m passgen generate -n 24 --symbols -c 5
    python -m passgen generate --no-numbers --copy
    python -m passgen classify 'Tr0ub4dor&3'
"""

import argparse
import logging
import sys

from passgen import (
    PassgenError,
    PasswordOptions,
    classify_strength,
    generate_password,
    options_from_password,
)
from passgen.clipboard import copy_to_clipboard
from passgen.config import DEFAULT_LENGTH, LOG_LEVEL, MAX_LENGTH, MIN_LENGTH, clamp_length

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords and rate their strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, {MIN_LENGTH}-{MAX_LENGTH} (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-numbers", action="store_true")
    gen_p.add_argument(
        "-s", "--symbols", action="store_true",
        help="Include symbols (off by default)",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--copy", action="store_true",
        help="Copy the last generated password to the clipboard",
    )

    # ── classify ──────────────────────────────────────────────────────
    cls_p = sub.add_parser(
        "classify", help="Rate the strength of existing passwords",
    )
    cls_p.add_argument("passwords", nargs="+", help="Passwords to rate")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "classify":
        return _cmd_classify(args)

    parser.print_help()
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    length = clamp_length(args.length)
    if length != args.length:
        logger.warning("Length %d out of range, using %d", args.length, length)

    options = PasswordOptions(
        length=length,
        uppercase=not args.no_uppercase,
        lowercase=not args.no_lowercase,
        numbers=not args.no_numbers,
        symbols=args.symbols,
    )
    if options.variety_count == 0:
        print("Error: at least one character class must be enabled", file=sys.stderr)
        return 2

    pwd = ""
    for _ in range(args.count):
        pwd = generate_password(options)
        label = classify_strength(pwd, options)
        print(f"  {pwd}  ({label.value})")

    if args.copy and pwd:
        try:
            copy_to_clipboard(pwd)
        except PassgenError as exc:
            print(f"Error: clipboard unavailable -- {exc}", file=sys.stderr)
            return 1
        print("  Copied to clipboard.")

    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    for pwd in args.passwords:
        options = options_from_password(pwd)
        label = classify_strength(pwd, options)
        print(f"  {label.value:<7} '{pwd}' -- {len(pwd)} chars, {options.variety_count} class(es)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
