# calc_lexer.py
# Tokenizer for arithmetic expressions.
#
# The scan is driven by one compiled regex with named groups, so each match
# classifies its token immediately. Any character the regex skips over is a
# gap in coverage and is reported as an invalid character.
#
# Whitespace is removed before scanning rather than lexed, which means
# "1 2" reads as the single literal 12.

import re
from typing import Iterator, List, Tuple

from calc_errors import InvalidCharacter, InvalidNumber

# ---------------------------------------------------------------------------
# TOKEN KINDS
# ---------------------------------------------------------------------------
NUMBER   = "NUMBER"
OPERATOR = "OPERATOR"
LPAREN   = "LPAREN"
RPAREN   = "RPAREN"

# ---------------------------------------------------------------------------
# REGEX BLUEPRINT
# ---------------------------------------------------------------------------
_NUMBER = r"[0-9.]+"   # maximal digit/dot run, validated by float() below

_TOKEN_RE = re.compile(
    rf"(?P<NUMBER>{_NUMBER})|"
    r"(?P<OPERATOR>[-+*/])|"     # unary and binary minus share one token
    r"(?P<LPAREN>\()|"
    r"(?P<RPAREN>\))",
)

# ---------------------------------------------------------------------------
# TOKEN RECORD
# ---------------------------------------------------------------------------
class Token(Tuple[str, object]):
    """
    Immutable token record: (kind, value).

    NUMBER tokens carry a float, OPERATOR tokens the operator character,
    parenthesis tokens the parenthesis itself.
    """
    pass


def strip_whitespace(text: str) -> str:
    return "".join(text.split())


def _to_number(literal: str) -> float:
    try:
        return float(literal)
    except ValueError:
        raise InvalidNumber(literal) from None


def lex(text: str) -> Iterator[Token]:
    """
    Single-pass generator over whitespace-free text. Raises InvalidCharacter
    at the first character no token pattern covers.
    """
    pos = 0
    for m in _TOKEN_RE.finditer(text):
        kind  = m.lastgroup
        value = m.group()

        if m.start() != pos:
            raise InvalidCharacter(text[pos])
        pos = m.end()

        if kind == NUMBER:
            value = _to_number(value)
        yield Token((kind, value))

    if pos != len(text):
        raise InvalidCharacter(text[pos])


def tokenize(text: str) -> List[Token]:
    """
    Strip whitespace and lex the whole input up front.

    The list is built completely before it is returned, so a bad character
    late in the input is reported even when an earlier part would fail to
    parse, and callers never see a partial token list.
    """
    return list(lex(strip_whitespace(text)))


def describe(token: Token) -> str:
    """Source symbol of a token, for error messages and the --debug dump."""
    kind, value = token
    if kind == NUMBER:
        return repr(value)
    return str(value)
