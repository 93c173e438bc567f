# calc_errors.py
# Error taxonomy shared by the arithmetic lexer and evaluator.
#
# Every error is terminal for the current evaluation: there is no recovery
# and no partial result. str(exc) is the message shown to the user, so the
# CLI prints it verbatim.

# ---------------------------------------------------------------------------
# BASE
# ---------------------------------------------------------------------------
class CalcError(Exception):
    """Root of every failure raised by tokenize() and evaluate()."""


# ---------------------------------------------------------------------------
# LEXER ERRORS
# ---------------------------------------------------------------------------
class EmptyExpression(CalcError):
    def __init__(self):
        super().__init__("Empty expression")


class InvalidCharacter(CalcError):
    """A character outside [0-9.+-*/()] was found while scanning."""
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid character: {char}")


class InvalidNumber(CalcError):
    """A run of digits and dots that float() refuses, e.g. 1.2.3 or a lone dot."""
    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Invalid number: {literal}")


# ---------------------------------------------------------------------------
# PARSER ERRORS
# ---------------------------------------------------------------------------
class UnexpectedEnd(CalcError):
    def __init__(self):
        super().__init__("Unexpected end of expression")


class UnexpectedToken(CalcError):
    """
    A token that cannot start a primary expression: a binary-only operator
    such as * or /, or a stray closing parenthesis.
    """
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unexpected token: {symbol}")


class UnclosedParen(CalcError):
    def __init__(self):
        super().__init__("Missing closing parenthesis")


class TrailingTokens(CalcError):
    """Tokens left over once the top-level expression is complete."""
    def __init__(self):
        super().__init__("Unexpected tokens")


class DepthLimitExceeded(CalcError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Depth limit exceeded ({limit})")


# ---------------------------------------------------------------------------
# ARITHMETIC ERRORS
# ---------------------------------------------------------------------------
class DivisionByZero(CalcError, ZeroDivisionError):
    def __init__(self):
        super().__init__("Division by zero")
