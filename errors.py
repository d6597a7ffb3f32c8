"""Errors raised while tokenizing or evaluating an expression.

Everything derives from `CalcError`, so a caller that only wants to know
whether a line was valid can catch that one class.
"""


class CalcError(Exception):
    pass


class TokenError(CalcError):
    pass


class InvalidNumber(TokenError):
    def __init__(self, text, pos):
        super().__init__(f"Invalid token: {text!r} at position {pos}")
        self.text = text
        self.pos = pos


class EvalError(CalcError):
    pass


class UnsupportedOperator(EvalError):
    def __init__(self, symbol):
        super().__init__(f"Operator {symbol} is not supported")
        self.symbol = symbol


class MismatchedParenthesis(EvalError):
    def __init__(self):
        super().__init__("Mismatched parenthesis")


class MismatchedOperands(EvalError):
    def __init__(self):
        super().__init__("Mismatched operands")


class EmptyExpression(EvalError):
    def __init__(self):
        super().__init__("Empty expression")
