import string as _string
from typing import Any, Callable, Iterable

from .Combinators import sequence
from .Parser import Parser
from .Prim import item, literal, satisfy, succeed

DIGITS = frozenset(_string.digits)
LOWER = frozenset(_string.ascii_lowercase)
UPPER = frozenset(_string.ascii_uppercase)
ALPHA = LOWER | UPPER
ALPHA_NUM = ALPHA | DIGITS
SPACE = frozenset(_string.whitespace)


def member_of(chars: Iterable[str]) -> Callable[[Any], bool]:
    """Predicate for exact membership in a set of single characters."""
    chars = frozenset(chars)
    return lambda c: isinstance(c, str) and c in chars


# 1. digit: Parses an ASCII digit
def digit() -> Parser[str]:
    return satisfy(member_of(DIGITS))


# 2. lower: Parses a lowercase ASCII letter
def lower() -> Parser[str]:
    return satisfy(member_of(LOWER))


# 3. upper: Parses an uppercase ASCII letter
def upper() -> Parser[str]:
    return satisfy(member_of(UPPER))


# 4. alpha: Parses an ASCII letter of either case
def alpha() -> Parser[str]:
    return satisfy(member_of(ALPHA))


# 5. alphaNum: Parses an ASCII letter or digit
def alpha_num() -> Parser[str]:
    return satisfy(member_of(ALPHA_NUM))


# 6. space: Parses one whitespace character (space, tab, newline, ...)
def space() -> Parser[str]:
    return satisfy(member_of(SPACE))


# 7. oneOf: Parses any character in the provided collection
def one_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    return satisfy(member_of(cs))


# 8. noneOf: Parses any character not in the provided collection
def none_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    excluded = member_of(cs)
    return satisfy(lambda c: not excluded(c))


# 9. anyChar: Parses any character
def any_char() -> Parser[Any]:
    return item()


# 10. literalString: Parses a specific string
def literal_string(target: str) -> Parser[str]:
    """
    Parses the exact string `target` and returns it.

    One `literal` per symbol, run as a flat `sequence` so long targets do
    not nest parsers; a mismatch anywhere fails the whole match without
    consuming input.
    """
    if target == "":
        return succeed("")
    return sequence(*[literal(c) for c in target]).map("".join)
