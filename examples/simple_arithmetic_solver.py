import logging
import sys

from pycombinator import (
    alt, forward, many, natural_token, run_parser, symbol, then, using,
)

# 1. Operator semantics
OPS = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": lambda x, y: x // y,
}


def fold_left(pair):
    # (first, [(op, operand), ...]) -> value, applied left to right
    acc, rest = pair
    for op, operand in rest:
        acc = OPS[op](acc, operand)
    return acc


# 2. Grammar
#   expr   ::= term (("+" | "-") term)*
#   term   ::= factor (("*" | "/") factor)*
#   factor ::= natural | "(" expr ")"
# 'expr' is declared first because 'factor' refers back to it.
expr = forward()

number = using(natural_token(), int)
parenthesised = using(then(then(symbol("("), expr), symbol(")")), lambda t: t[0][1])
factor = alt(number, parenthesised)

term = using(then(factor, many(then(alt(symbol("*"), symbol("/")), factor))), fold_left)
expr.define(using(then(term, many(then(alt(symbol("+"), symbol("-")), term))), fold_left))


def evaluate(text):
    """Evaluate `text`, returning None unless the whole input is an expression."""
    result = run_parser(expr, text)
    if not result or result.remaining:
        return None
    return result.value


if __name__ == "__main__":
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG)

    test_cases = [
        "2 + 3",            # 5
        "2 * 3",            # 6
        "2 + 3 * 4",        # 14 (Precedence check)
        "(2 + 3) * 4",      # 20 (Parens check)
        "2+(4-1)*3",        # 11
        "10 / 2 + 3",       # 8
        "10 - 5 - 2",       # 3 (Left associativity)
        "2 +",              # not an expression
    ]

    print(f"{'Expression':<20} | {'Result':<10}")
    print("-" * 35)

    for expr_str in test_cases:
        try:
            value = evaluate(expr_str)
            print(f"{expr_str:<20} | {'no parse' if value is None else value}")
        except ZeroDivisionError as e:
            print(f"{expr_str:<20} | Runtime Error: {e}")
