from dataclasses import replace

from .Char import alpha, alpha_num, one_of
from .Prim import literal
from .Token import LanguageDef

# -----------------------------------------------------------
# Minimal language definition
# -----------------------------------------------------------

# The core's own lexical rules: ASCII letters and digits, no reserved
# words. Use it as the basis for other definitions.
empty_def = LanguageDef(
    ident_start=alpha(),
    ident_letter=alpha_num(),
    reserved_names=[],
    case_sensitive=True,
)

# -----------------------------------------------------------
# Styles: python_style, sql_style
# -----------------------------------------------------------

python_style = replace(
    empty_def,
    ident_start=alpha() | literal("_"),
    ident_letter=alpha_num() | literal("_"),
    reserved_names=[
        "False", "None", "True", "and", "as", "assert", "async", "await",
        "break", "class", "continue", "def", "del", "elif", "else", "except",
        "finally", "for", "from", "global", "if", "import", "in", "is",
        "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
        "while", "with", "yield",
    ],
    case_sensitive=True,
)

# Keywords match regardless of case, as in SQL
sql_style = replace(
    empty_def,
    ident_start=alpha() | literal("_"),
    ident_letter=alpha_num() | one_of("_$"),
    reserved_names=[
        "select", "from", "where", "and", "or", "not", "insert", "into",
        "values", "update", "set", "delete", "create", "table", "null",
    ],
    case_sensitive=False,
)
