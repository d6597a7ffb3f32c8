"""The table of supported binary operators.

All arithmetic is IEEE-754 double precision, so dividing by zero or
overflowing gives inf/nan rather than raising:

>>> OPS["/"](5, 0), OPS["/"](-5, 0)
(inf, -inf)
>>> OPS["^"](2, 10)
1024.0
>>> OPS["^"](-8, 1 / 3)
nan
"""
import re
from types import MappingProxyType
from typing import Callable, Literal, NamedTuple

import numpy as np

from errors import MismatchedOperands


class Op(NamedTuple):
    symbol: str
    prec: int
    assoc: Literal["l", "r"]  # left-associative, right-associative
    fun: Callable

    def __call__(self, left, right):
        with np.errstate(all="ignore"):
            return float(self.fun(np.float64(left), np.float64(right)))

    def __repr__(self):
        return f"op({self.symbol!r:})"

    def left_first(self, other):
        """Whether `self`, pending on the stack, must be applied before `other`.

        >>> OPS["*"].left_first(OPS["+"]), OPS["+"].left_first(OPS["*"])
        (True, False)
        >>> OPS["-"].left_first(OPS["+"]), OPS["^"].left_first(OPS["^"])
        (True, False)
        """
        return self.prec > other.prec or self.prec == other.prec and other.assoc == "l"

    def apply(self, stack):
        """Replace the top two operands of `stack` by their combination.

        >>> stack = [1.0, 8.0, 2.0]
        >>> OPS["/"].apply(stack)
        >>> stack
        [1.0, 4.0]
        """
        if len(stack) < 2:
            raise MismatchedOperands()
        stack[-2:] = [self(*stack[-2:])]


OP_GROUPS = """
add+l subtract-l
multiply*l divide/l
power^r
""".strip()
OPS = MappingProxyType(
    {
        o: Op(o, prec, assoc, getattr(np, fun))
        for prec, op_groups in enumerate(OP_GROUPS.split("\n"), 1)
        for [(fun, o, assoc)] in map(
            re.compile(r"^(\w+)(\W+)(\w+)$").findall, op_groups.split()
        )
    }
)


def lookup(symbol, ops=OPS):
    """Return the operator for `symbol`, or None if it isn't supported.

    >>> lookup("^")
    op('^')
    >>> lookup("%") is None
    True
    """
    return ops.get(symbol)
