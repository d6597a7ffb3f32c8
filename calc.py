#!/usr/bin/env python3
"""Read infix expressions from stdin, one per line, and print their values.

>>> calculate("2 + 3 * 4"), calculate("3--2"), calculate("5/0")
(14.0, 5.0, inf)

By default the first bad line ends the session with exit status 1; with
--keep-going it is reported and the next line is read.
"""
import argparse
import logging
import math
import os
import sys

from errors import CalcError
from lexer import tokenize
from shunting_yard import evaluate

DEBUG = bool(os.getenv("CALC_DEBUG", False))

log = logging.getLogger(__name__)


def calculate(line):
    return evaluate(tokenize(line))


def canonicalize_num(num):
    """Shortest representation of `num`, with integral values printed as ints.

    Integers from 1e16 up keep float notation.

    >>> canonicalize_num(14.0), canonicalize_num(2.5), canonicalize_num(-float("inf"))
    ('14', '2.5', '-inf')
    >>> canonicalize_num(1e300)
    '1e+300'
    """
    small = math.isfinite(num) and abs(num) < 1e16
    return repr(integer if small and (integer := int(num)) == num else num)


def format_result(num, digits=None):
    """
    >>> format_result(2 / 3, digits=6), format_result(1e20, digits=6)
    ('0.666667', '1e+20')
    """
    if digits is None:
        return canonicalize_num(num)
    return f"{num:.{digits}g}"


def digit_count(text):
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: {text}")
    return n


def parse_args(argv=None):
    ap = argparse.ArgumentParser(
        prog="calc", description="Evaluate infix arithmetic, one expression per line."
    )
    ap.add_argument(
        "--keep-going",
        action="store_true",
        help="report a bad line and carry on with the next one",
    )
    ap.add_argument(
        "--digits",
        type=digit_count,
        metavar="N",
        help="print results with N significant digits (like %%.Ng)",
    )
    ap.add_argument(
        "--debug",
        action="store_true",
        default=DEBUG,
        help="log tokens and reductions; also set by CALC_DEBUG",
    )
    return ap.parse_args(argv)


def main(argv=None, stdin=None, stdout=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    failed = False
    for line in stdin:
        line = line.rstrip("\r\n")
        if not line:
            continue
        try:
            ans = calculate(line)
        except CalcError as e:
            log.error("%s", e)
            if not args.keep_going:
                return 1
            failed = True
            continue
        print(format_result(ans, args.digits), file=stdout)
    return int(failed)


if __name__ == "__main__":
    sys.exit(main())
