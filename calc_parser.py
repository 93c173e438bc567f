# calc_parser.py
# Recursive-descent evaluator for arithmetic expressions, plus its CLI.
#
# =============================================================================
#  GRAMMAR (precedence low -> high)
# =============================================================================
#
#   Expression := Term
#   Term       := Factor (('+' | '-') Factor)*
#   Factor     := Primary (('*' | '/') Primary)*
#   Primary    := Number | '(' Expression ')' | '-' Primary
#
# Parsing and evaluation are fused: each rule returns the float value of the
# tokens it consumed, and no syntax tree is built. Binary levels fold left,
# so 10-4-2 is (10-4)-2. Unary minus is right-recursive and binds tighter
# than every binary operator, so --5 is 5 and 2*-3 is -6.
#
# The lexer emits one "-" token for both roles. Whichever rule is active when
# a "-" arrives decides: Term treats it as subtraction, Primary as negation.
#
# The token cursor is a one-slot pushback iterator; a consumed token is never
# revisited. Errors say what failed, not where.
# =============================================================================

import argparse
import operator
import sys
from typing import Iterator, List, Optional, TextIO

from calc_errors import (
    CalcError,
    DepthLimitExceeded,
    DivisionByZero,
    EmptyExpression,
    TrailingTokens,
    UnclosedParen,
    UnexpectedEnd,
    UnexpectedToken,
)
from calc_lexer import LPAREN, NUMBER, OPERATOR, RPAREN, Token, describe, strip_whitespace, tokenize

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = None   # None = nesting bounded only by the interpreter stack
PROMPT              = "> "
QUIT_COMMAND        = "quit"

DEMO_EXPRESSIONS = (
    "2+3",
    "10-4",
    "3*4",
    "8/2",
    "2+3*4",
    "(2+3)*4",
    "2.5+1.5",
    "-5+3",
    "(2+3)*(4-2)/3",
)

_ADDITIVE       = {"+": operator.add, "-": operator.sub}
_MULTIPLICATIVE = {"*": operator.mul, "/": operator.truediv}

# ---------------------------------------------------------------------------
# LOOKAHEAD RING
# ---------------------------------------------------------------------------
class LookAhead:
    """
    One-slot pushback iterator over the token list.

    peek() shows the next token without consuming it; next() consumes it.
    Both raise StopIteration once the stream is drained.
    """
    def __init__(self, iterable: Iterator[Token]):
        self._iter = iter(iterable)
        self._buf: List[Token] = []

    def __iter__(self):
        return self

    def __next__(self):
        if self._buf:
            return self._buf.pop()
        return next(self._iter)

    def peek(self) -> Token:
        if not self._buf:
            self._buf.append(next(self._iter))
        return self._buf[-1]


def _peek_operator(tokens: LookAhead, table: dict):
    """Return the operator symbol when the next token belongs to table, else None."""
    try:
        kind, value = tokens.peek()
    except StopIteration:
        return None
    if kind == OPERATOR and value in table:
        return value
    return None

# ---------------------------------------------------------------------------
# GRAMMAR RULES
# ---------------------------------------------------------------------------
def _parse_expression(tokens: LookAhead, depth: int, max_depth: Optional[int]) -> float:
    return _parse_term(tokens, depth, max_depth)


def _parse_term(tokens: LookAhead, depth: int, max_depth: Optional[int]) -> float:
    acc = _parse_factor(tokens, depth, max_depth)
    while True:
        op = _peek_operator(tokens, _ADDITIVE)
        if op is None:
            return acc
        next(tokens)
        acc = _ADDITIVE[op](acc, _parse_factor(tokens, depth, max_depth))


def _parse_factor(tokens: LookAhead, depth: int, max_depth: Optional[int]) -> float:
    """
    Multiplicative level. A zero divisor (0.0 or -0.0) aborts the whole
    evaluation instead of producing inf or nan.
    """
    acc = _parse_primary(tokens, depth, max_depth)
    while True:
        op = _peek_operator(tokens, _MULTIPLICATIVE)
        if op is None:
            return acc
        next(tokens)
        rhs = _parse_primary(tokens, depth, max_depth)
        if op == "/" and rhs == 0.0:
            raise DivisionByZero()
        acc = _MULTIPLICATIVE[op](acc, rhs)


def _parse_primary(tokens: LookAhead, depth: int, max_depth: Optional[int]) -> float:
    if max_depth is not None and depth > max_depth:
        raise DepthLimitExceeded(max_depth)
    try:
        token = next(tokens)
    except StopIteration:
        raise UnexpectedEnd() from None

    kind, value = token
    if kind == NUMBER:
        return value
    if kind == LPAREN:
        result = _parse_expression(tokens, depth + 1, max_depth)
        try:
            closing, _ = next(tokens)
        except StopIteration:
            raise UnclosedParen() from None
        if closing != RPAREN:
            raise UnclosedParen()
        return result
    if kind == OPERATOR and value == "-":
        return -_parse_primary(tokens, depth + 1, max_depth)

    raise UnexpectedToken(describe(token))

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def evaluate(text: str, *, max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT) -> float:
    """
    Evaluate an arithmetic expression and return its value as a float.

    Raises a CalcError subclass on any failure. The whole input is lexed
    before parsing starts, and tokens left after a complete expression are
    rejected. Holds no state between calls, so it is safe to call from
    several threads at once.
    """
    compact = strip_whitespace(text)
    if not compact:
        raise EmptyExpression()

    tokens = LookAhead(tokenize(compact))
    result = _parse_expression(tokens, 0, max_depth)
    try:
        tokens.peek()
    except StopIteration:
        return result
    raise TrailingTokens()


def format_number(value: float) -> str:
    """Integral values print without a fractional part: 5 rather than 5.0."""
    if value.is_integer():
        return str(int(value))
    return repr(value)

# ---------------------------------------------------------------------------
# DEMO AND INTERACTIVE LOOP
# ---------------------------------------------------------------------------
def run_demo(out: TextIO = None, expressions=DEMO_EXPRESSIONS) -> None:
    out = out or sys.stdout
    print("Calculator Demo", file=out)
    print("===============", file=out)
    for expr in expressions:
        try:
            print(f"{expr} = {format_number(evaluate(expr))}", file=out)
        except CalcError as exc:
            print(f"{expr} Error: {exc}", file=out)


def run_repl(stdin: TextIO = None, out: TextIO = None, *, max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT) -> None:
    """
    Line-oriented session. QUIT_COMMAND or end of input ends it; blank lines
    are skipped without evaluation.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(f"Interactive mode (enter expressions, '{QUIT_COMMAND}' to exit):", file=out)
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if line == QUIT_COMMAND:
            break
        if not line:
            continue
        try:
            print(f"= {format_number(evaluate(line, max_depth=max_depth))}", file=out)
        except CalcError as exc:
            print(f"Error: {exc}", file=out)

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _read_expressions(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip()]


def _cli(argv: List[str]) -> int:
    """
    Command-line interface.

    Exit code 0 when every expression evaluated, 1 when any raised a
    CalcError. With no expressions and no file, starts an interactive session.
    """
    ap = argparse.ArgumentParser(description="Arithmetic expression evaluator")
    ap.add_argument("expression", nargs="*", help="expression to evaluate (quote it for the shell)")
    ap.add_argument("-f", "--file", help="evaluate one expression per non-blank line of FILE")
    ap.add_argument("--debug", action="store_true", help="dump token stream and exit")
    ap.add_argument("--demo", action="store_true", help="evaluate the built-in sample expressions")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT,
                    help="reject expressions nested deeper than this")
    args = ap.parse_args(argv)

    if args.demo:
        run_demo()
        return 0

    if not args.expression and args.file is None:
        run_repl(max_depth=args.max_depth)
        return 0

    expressions = list(args.expression)
    if args.file is not None:
        expressions.extend(_read_expressions(args.file))

    status = 0
    for expr in expressions:
        try:
            if args.debug:
                for tok in tokenize(expr):
                    print(tok)
                continue
            print(format_number(evaluate(expr, max_depth=args.max_depth)))
        except CalcError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            status = 1
    return status


def main() -> None:
    sys.exit(_cli(sys.argv[1:]))

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
