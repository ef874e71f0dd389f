# Core
from .Parser import (
    Parser, Input, Success, Failure, FAILURE, ParseResult,
    PyCombinatorError, GrammarError, InfiniteRepetitionError,
)
from .Prim import succeed, fail, item, satisfy, literal, lazy, forward, run_parser

# Combinators
from .Combinators import (
    alt, then, using, many, some, skip_many,
    flatten, sequence, choice, option, optional, between, count,
    sep_by, sep_by1, chainl1, chainr1, eof, look_ahead, not_followed_by,
    parser_trace, parser_traced,
)

# Characters
from .Char import (
    digit, lower, upper, alpha, alpha_num, space,
    one_of, none_of, any_char, literal_string,
)

# Lexical tokens
from .Token import (
    identifier, natural, integer, whitespace, token, symbol,
    identifier_token, natural_token,
    TokenParser, LanguageDef,
)

# Standard Language Definitions
from .Language import empty_def, python_style, sql_style
