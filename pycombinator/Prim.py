import threading
from typing import Any, Callable, Sequence, Union

from .Parser import (
    FAILURE, ForwardCell, GrammarError, Input, ParseResult, Parser, Success, T,
    as_input,
)


def succeed(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(inp: Input) -> ParseResult[T]:
        return Success(value, inp)
    return Parser(parse)


# The always-failing parser; the identity element of alt
def fail() -> Parser[Any]:
    """A parser that fails on every input."""
    def parse(inp: Input) -> ParseResult[Any]:
        return FAILURE
    return Parser(parse)


def item() -> Parser[Any]:
    """Consume exactly one symbol, whatever it is."""
    def parse(inp: Input) -> ParseResult[Any]:
        if not inp:
            return FAILURE
        return Success(inp.peek(), inp.advance())
    return Parser(parse)


def satisfy(predicate: Callable[[Any], bool]) -> Parser[Any]:
    """Consume one symbol for which `predicate` holds. Fails without consuming otherwise."""
    if not callable(predicate):
        raise GrammarError(f"satisfy expects a predicate, got {predicate!r}")

    def parse(inp: Input) -> ParseResult[Any]:
        if not inp:
            return FAILURE
        symbol = inp.peek()
        if predicate(symbol):
            return Success(symbol, inp.advance())
        return FAILURE
    return Parser(parse)


def literal(symbol: Any) -> Parser[Any]:
    """Match exactly `symbol`."""
    return satisfy(lambda x: x == symbol)


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """
    Defer building a parser until it is first run.

    Lets a grammar rule refer to itself (or to a rule defined later) before
    its own construction has finished. The thunk is evaluated at most once.
    """
    if not callable(thunk):
        raise GrammarError(f"lazy expects a zero-argument callable, got {thunk!r}")
    lock = threading.Lock()
    cell: list = []

    def parse(inp: Input) -> ParseResult[T]:
        if not cell:
            with lock:
                if not cell:
                    cell.append(thunk())
        return cell[0].parse_fn(inp)
    return Parser(parse)


def forward() -> Parser[Any]:
    """
    Declare a parser now and define it later, for recursive grammars.

        expr = forward()
        term = natural_token() | between(symbol("("), symbol(")"), expr)
        expr.define(chainl1(term, add_op))

    Running it before `define` raises GrammarError.
    """
    return Parser(ForwardCell())


def run_parser(parser: Parser[T], data: Union[Input, Sequence[Any]]) -> ParseResult[T]:
    """Run `parser` over a whole sequence (str, bytes, list, ...)."""
    return parser(as_input(data))
