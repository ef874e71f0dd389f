from dataclasses import dataclass, field
from typing import Any, Callable, List

from .Parser import Parser
from .Prim import fail, satisfy, succeed
from .Char import alpha, alpha_num, digit, literal_string, one_of, space
from .Combinators import (
    between, many, not_followed_by, option, sep_by, sep_by1, sequence, some, then,
)


# --- Lexical building blocks ---

def identifier() -> Parser[str]:
    """Zero or more alphanumeric characters. Always succeeds, possibly with ""."""
    return many(alpha_num()).map("".join)


def natural() -> Parser[str]:
    """One or more digits, as the numeral text (see `integer` for the value)."""
    return some(digit()).map("".join)


def integer() -> Parser[int]:
    return natural().map(int)


def whitespace() -> Parser[str]:
    """Consume and discard any amount of whitespace. Always succeeds with ""."""
    return many(space()).map(lambda _: "")


def token(p: Parser[Any]) -> Parser[Any]:
    """Run `p`, tolerating whitespace on either side of it."""
    return then(then(whitespace(), p), whitespace()).map(lambda t: t[0][1])


def symbol(target: str) -> Parser[str]:
    """Whitespace-tolerant exact text, for keywords and punctuation."""
    return token(literal_string(target))


def identifier_token() -> Parser[str]:
    return token(identifier())


def natural_token() -> Parser[str]:
    return token(natural())


@dataclass
class LanguageDef:
    """
    Defines the lexical rules for a language.
    """
    space_char: Parser[str] = space()
    ident_start: Parser[str] = alpha()
    ident_letter: Parser[str] = alpha_num()
    reserved_names: List[str] = field(default_factory=list)
    case_sensitive: bool = True


class TokenParser:
    """
    A helper that generates lexeme parsers for a specific LanguageDef.

    Every lexeme skips the whitespace that follows it, so a grammar only
    needs to skip leading whitespace once, with `white_space`.
    """
    def __init__(self, lang: LanguageDef):
        self.lang = lang

        # --- Whitespace ---
        self.white_space = many(lang.space_char).map(lambda _: "")

        # --- Lexeme Helper (skips trailing whitespace) ---
        self.lexeme: Callable[[Parser[Any]], Parser[Any]] = lambda p: p < self.white_space
        self.symbol = lambda name: self.lexeme(literal_string(name))

        # --- Symbols ---
        self.parens = lambda p: between(self.symbol("("), self.symbol(")"), p)
        self.braces = lambda p: between(self.symbol("{"), self.symbol("}"), p)
        self.brackets = lambda p: between(self.symbol("["), self.symbol("]"), p)

        self.semi = self.symbol(";")
        self.comma = self.symbol(",")

        self.semi_sep = lambda p: sep_by(p, self.semi)
        self.semi_sep1 = lambda p: sep_by1(p, self.semi)
        self.comma_sep = lambda p: sep_by(p, self.comma)
        self.comma_sep1 = lambda p: sep_by1(p, self.comma)

        # --- Names ---
        raw_name = then(lang.ident_start, many(lang.ident_letter)).map(
            lambda pair: pair[0] + "".join(pair[1])
        )
        self.identifier = self.lexeme(raw_name.bind(
            lambda name: fail() if self.is_reserved(name) else succeed(name)
        ))
        self.reserved = lambda name: self.lexeme(
            self._word(name) < not_followed_by(lang.ident_letter)
        )

        # --- Numbers ---
        self.natural = self.lexeme(natural().map(int))
        self.integer = self.lexeme(
            then(option("", one_of("+-")), natural()).map(lambda pair: int(pair[0] + pair[1]))
        )

    def is_reserved(self, name: str) -> bool:
        if self.lang.case_sensitive:
            return name in self.lang.reserved_names
        return name.lower() in (n.lower() for n in self.lang.reserved_names)

    def _word(self, name: str) -> Parser[str]:
        if self.lang.case_sensitive:
            return literal_string(name)
        # Case-insensitive match, returning the text as written in the input
        letters = [satisfy(lambda c, ch=ch: isinstance(c, str) and c.lower() == ch.lower())
                   for ch in name]
        return sequence(*letters).map("".join)
