#!/usr/bin/env python3
"""
alu8cli — 8-bit ALU Simulator CLI

Usage:
    python alu8cli.py                         # run the demonstration vectors
    python alu8cli.py <op> <a> [b]            # evaluate one operation
    python alu8cli.py --all-ops <a> <b>       # every operation on one pair
                      [--format text|json] [-v] [-q] [--log-file FILE]

Operands accept decimal, 0x.. hex, $.. hex (Motorola convention) or 0b.. binary.

Examples:
    python alu8cli.py ADD 15 27
    python alu8cli.py sub 0x0A 0x28 --format json
    python alu8cli.py SHL '$81'
    python alu8cli.py --all-ops 0x7F 0x01 -vv
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from alu8 import (
    AluError, AluOp, DEMO_VECTORS, evaluate, run_vectors,
    format_result, result_to_dict, __version__,
)
from alu8.errors import OperandRangeError

logger = logging.getLogger("alu8cli")

OUTPUT_FORMATS = ("text", "json")
DEFAULT_FORMAT = "text"

BANNER = "8-bit ALU with Status Flags (Simulation Mode)"
TRAILER = "End of ALU demonstration."
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_DIGITS = {2: "01", 10: "0123456789", 16: "0123456789ABCDEF"}


def parse_byte(value: str, name: str = "value") -> int:
    """Parse an operand that may be hex (0x... or $...), binary (0b...), or decimal.

    Only plain digits are accepted: no sign, no '_' separators.
    """
    text = value.strip()
    if text[:2] in ("0x", "0X"):
        digits, base = text[2:], 16
    elif text.startswith("$"):
        digits, base = text[1:], 16  # Motorola hex convention
    elif text[:2] in ("0b", "0B"):
        digits, base = text[2:], 2
    else:
        digits, base = text, 10
    if not digits or any(c not in _DIGITS[base] for c in digits.upper()):
        raise OperandRangeError(name, value)
    n = int(digits, base)
    if not 0 <= n <= 0xFF:
        raise OperandRangeError(name, value)
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alu8cli",
        description="8-bit ALU simulator with Z/C/N/V status flags",
        epilog="Operations: " + ", ".join(op.mnemonic for op in AluOp),
    )
    parser.add_argument("op", nargs="?", help="Operation mnemonic (ADD, SUB, AND, OR, XOR, SHL, SHR)")
    parser.add_argument("a", nargs="?", help="First operand")
    parser.add_argument("b", nargs="?", help="Second operand (ignored by SHL/SHR)")
    parser.add_argument("--all-ops", nargs=2, metavar=("A", "B"),
                        help="Evaluate every operation on one operand pair")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=DEFAULT_FORMAT,
                        help=f"Output format (default: {DEFAULT_FORMAT})")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase log verbosity (-v, -vv)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Suppress all log output except errors")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("--version", action="version",
                        version=f"alu8cli {__version__}")
    return parser


def setup_logging(args) -> None:
    """Configure the root logger from -v / -q / --log-file."""
    if args.quiet:
        level = logging.ERROR
    elif args.verbose == 0:
        level = logging.WARNING
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    handlers = [logging.StreamHandler(sys.stderr)]
    if args.log_file:
        log_path = Path(args.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def _collect(args, parser) -> list:
    if args.all_ops:
        if args.op is not None:
            parser.error("--all-ops cannot be combined with a positional operation")
        a = parse_byte(args.all_ops[0], "a")
        b = parse_byte(args.all_ops[1], "b")
        return [evaluate(a, b, op) for op in AluOp]

    if args.op is None:
        logger.info("No operation given, running %d demo vectors", len(DEMO_VECTORS))
        return run_vectors(DEMO_VECTORS)

    op = AluOp.parse(args.op)
    if args.a is None:
        parser.error(f"{op.mnemonic} needs at least one operand")
    if args.b is None and not op.is_shift:
        parser.error(f"{op.mnemonic} needs two operands")
    a = parse_byte(args.a, "a")
    b = parse_byte(args.b, "b") if args.b is not None else 0
    return [evaluate(a, b, op)]


def _emit(results, out_format: str, demo: bool) -> None:
    if out_format == "json":
        print(json.dumps([result_to_dict(r) for r in results], indent=2))
        return
    if demo:
        print(BANNER)
        print("-" * 48)
        print()
    for res in results:
        print(format_result(res))
    if demo:
        print()
        print(TRAILER)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(args)
        results = _collect(args, parser)
        demo = args.op is None and not args.all_ops
        _emit(results, args.format, demo)
    except AluError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
