"""
validated-intervals Command-Line Interface

Evaluates interval expressions from the command line:

    vinterval eval sin "[0, 10]"
    vinterval op "[1, 2]" / "[-1, 1]"
    vinterval parse "0.1"
"""

import sys
import argparse
import logging
from typing import Callable, Dict

from . import (
    DomainError,
    IntervalError,
    arithmetic,
    functions,
    parse_interval,
    __version__,
)
from .core import canonical_dumps
from .display import format_interval
from .interval import Interval


FUNCTIONS: Dict[str, Callable[[Interval], Interval]] = {
    'sqrt': functions.sqrt,
    'exp': functions.exp,
    'exp2': functions.exp2,
    'exp10': functions.exp10,
    'log': functions.log,
    'log2': functions.log2,
    'log10': functions.log10,
    'sin': functions.sin,
    'cos': functions.cos,
    'tan': functions.tan,
    'asin': functions.asin,
    'acos': functions.acos,
    'atan': functions.atan,
    'sinh': functions.sinh,
    'cosh': functions.cosh,
    'tanh': functions.tanh,
    'asinh': functions.asinh,
    'acosh': functions.acosh,
    'atanh': functions.atanh,
    'abs': arithmetic.abs,
    'neg': arithmetic.neg,
    'inv': arithmetic.inv,
    'sqr': arithmetic.sqr,
}

OPERATORS: Dict[str, Callable[[Interval, Interval], Interval]] = {
    '+': arithmetic.add,
    '-': arithmetic.sub,
    '*': arithmetic.mul,
    '/': arithmetic.div,
    '^': arithmetic.pow,
    '&': lambda x, y: x.intersect(y),
    '|': lambda x, y: x.hull(y),
}


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def _report(result: Interval, args) -> None:
    if args.json:
        print(canonical_dumps({'result': result}))
    else:
        print(format_interval(result, digits=args.digits))


def cmd_eval(args):
    """Apply an elementary function to an interval."""
    x = parse_interval(args.interval)
    result = FUNCTIONS[args.function](x)
    _report(result, args)
    return 0


def cmd_op(args):
    """Apply a binary operator to two intervals."""
    left = parse_interval(args.left)
    right = parse_interval(args.right)
    result = OPERATORS[args.operator](left, right)
    _report(result, args)
    return 0


def cmd_parse(args):
    """Show the enclosure of an interval literal."""
    result = parse_interval(args.text)
    _report(result, args)
    return 0


def cmd_version(args):
    """Print version information."""
    print(f"validated-intervals {__version__}")
    print("Validated interval arithmetic with outward rounding")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='vinterval',
        description='Validated interval arithmetic'
    )
    parser.add_argument('--json', action='store_true',
                        help='Print canonical JSON instead of text')
    parser.add_argument('--digits', type=_positive_int, default=None,
                        help='Significant digits per bound, rounded outward')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    eval_parser = subparsers.add_parser('eval', help='Apply an elementary function')
    eval_parser.add_argument('function', choices=list(FUNCTIONS.keys()),
                             help='Function to apply')
    eval_parser.add_argument('interval', help='Interval literal, e.g. "[0, 1]"')
    eval_parser.set_defaults(func=cmd_eval)

    op_parser = subparsers.add_parser('op', help='Apply a binary operator')
    op_parser.add_argument('left', help='Left interval literal')
    op_parser.add_argument('operator', choices=list(OPERATORS.keys()),
                           help='Operator')
    op_parser.add_argument('right', help='Right interval literal')
    op_parser.set_defaults(func=cmd_op)

    parse_parser = subparsers.add_parser('parse', help='Show the enclosure of a literal')
    parse_parser.add_argument('text', help='Interval literal')
    parse_parser.set_defaults(func=cmd_parse)

    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except DomainError as e:
        print(f"Domain error: {e}", file=sys.stderr)
        return 1
    except IntervalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
