"""Split an expression line into number, operator and bracket tokens.

A `+` or `-` starts a signed number unless it directly follows a number
token. So binary minus has to come right after a number, and `3--2` lexes
as `3 - (-2)`:

>>> tokenize("3--2")
[num(3.0), op('-'), num(-2.0)]
>>> tokenize("(2+3) * -4")
[LPAREN, num(2.0), op('+'), num(3.0), RPAREN, op('*'), num(-4.0)]

Operator characters are not checked here, that happens at evaluation:

>>> tokenize("2%3")
[num(2.0), op('%'), num(3.0)]
"""
import re
from typing import Literal, NamedTuple, Union

from errors import InvalidNumber

NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
DIGITS = "0123456789"


class Token(NamedTuple):
    kind: Literal["num", "op", "(", ")"]
    value: Union[float, str, None] = None

    def __repr__(self):
        if self.kind == "(":
            return "LPAREN"
        if self.kind == ")":
            return "RPAREN"
        return f"{self.kind}({self.value!r})"


def num(value):
    return Token("num", float(value))


def op(symbol):
    return Token("op", symbol)


LPAREN = Token("(")
RPAREN = Token(")")


def tokenize(line):
    """Return the list of tokens in `line`.

    >>> tokenize("  1.5e3 ^ .5")
    [num(1500.0), op('^'), op('.'), num(5.0)]
    >>> tokenize("2 * -(1)")
    Traceback (most recent call last):
    ...
    errors.InvalidNumber: Invalid token: '-(1)' at position 4
    """
    tokens = []
    pos = 0
    while pos < len(line):
        c = line[pos]
        if c.isspace():
            pos += 1
            continue
        signed = c in "+-" and (not tokens or tokens[-1].kind != "num")
        if signed or c in DIGITS:
            if not (m := NUMBER.match(line, pos)):
                raise InvalidNumber(line[pos:], pos)
            tokens.append(num(m[0]))
            pos = m.end()
            continue
        tokens.append(Token(c) if c in "()" else op(c))
        pos += 1
    return tokens
