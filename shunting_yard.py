"""Evaluate a token list with Dijkstra's shunting-yard algorithm.

Operators are applied to the operand stack as soon as precedence allows,
so no postfix form is ever built.

>>> from lexer import tokenize
>>> evaluate(tokenize("2+3*4")), evaluate(tokenize("(2+3)*4"))
(14.0, 20.0)
>>> evaluate(tokenize("2^3^2"))
512.0
"""
import logging

from errors import (
    EmptyExpression,
    MismatchedOperands,
    MismatchedParenthesis,
    UnsupportedOperator,
)
from opstable import OPS, Op, lookup

log = logging.getLogger(__name__)


def reduce(o, operands):
    log.debug("apply %s to %s", o.symbol, operands[-2:])
    o.apply(operands)


def evaluate(tokens, ops=OPS):
    """Return the value of the expression in `tokens`.

    `ops` maps operator symbols to `Op`s and defaults to the builtin table.
    Both stacks are local, so evaluations never share state.
    """
    log.debug("evaluate %s", tokens)
    operands = []
    pending = []  # Ops and left brackets
    for token in tokens:
        if token.kind == "num":
            operands.append(token.value)
        elif token.kind == "op":
            if (o := lookup(token.value, ops)) is None:
                raise UnsupportedOperator(token.value)
            while pending and isinstance(pending[-1], Op) and pending[-1].left_first(o):
                reduce(pending.pop(), operands)
            pending.append(o)
        elif token.kind == "(":
            pending.append(token)
        else:
            while pending and isinstance(pending[-1], Op):
                reduce(pending.pop(), operands)
            if not pending:
                raise MismatchedParenthesis()
            pending.pop()

    while pending:
        if not isinstance(o := pending.pop(), Op):
            raise MismatchedParenthesis()
        reduce(o, operands)

    if not operands:
        raise EmptyExpression()
    if len(operands) > 1:
        raise MismatchedOperands()
    (ans,) = operands
    log.debug("result %r", ans)
    return ans
