import logging
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .Parser import (
    FAILURE, GrammarError, InfiniteRepetitionError, Input, ParseResult, Parser,
    Success, T, U,
)
from .Prim import fail, succeed

log = logging.getLogger("pycombinator")

AccType = TypeVar('AccType')


# 1. alt: ordered choice, first success wins
def alt(p1: Parser[T], p2: Parser[T]) -> Parser[T]:
    """
    Try `p1`; if it fails, try `p2` on the same input.

    `p2` is never run when `p1` succeeds.
    """
    return p1 | p2


# 2. then: sequencing, pairing both values
def then(p1: Parser[T], p2: Parser[U]) -> Parser[Tuple[T, U]]:
    """
    Run `p1` then `p2` on what is left, producing `(v1, v2)`.

    If either fails the whole sequence fails and nothing is consumed.
    """
    return p1 & p2


# 3. using: transform the result of a parser
def using(p: Parser[T], f: Callable[[T], U]) -> Parser[U]:
    """Apply `f` to the value of every successful parse of `p`."""
    return p.map(f)


def _many_accum(
    acc_func: Callable[[Any, AccType], AccType],
    p: Parser[Any],
    empty_acc_value: Callable[[], AccType],
) -> Parser[AccType]:
    def parse_accum(inp: Input) -> ParseResult[AccType]:
        acc = empty_acc_value()
        current = inp
        while True:
            result = p.parse_fn(current)
            if not result:
                # The failed attempt consumed nothing; stop after the last success
                return Success(acc, current)
            if result.remaining.offset <= current.offset:
                raise InfiniteRepetitionError(
                    f"repeated parser succeeded without consuming input at offset {current.offset}"
                )
            acc = acc_func(result.value, acc)
            current = result.remaining
    return Parser(parse_accum)


def _append(item: Any, acc: List[Any]) -> List[Any]:
    acc.append(item)
    return acc


# 4. many: zero or more
def many(p: Parser[T]) -> Parser[List[T]]:
    """
    Parse zero or more occurrences of `p`, greedily. Always succeeds.

    Equivalent to ``alt(using(then(p, many(p)), cons), succeed([]))`` but runs
    as a loop, so long inputs do not exhaust the call stack. Raises
    InfiniteRepetitionError if `p` succeeds without consuming input.
    """
    return _many_accum(_append, p, list)


# 5. some: one or more
def some(p: Parser[T]) -> Parser[List[T]]:
    """Parse one or more occurrences of `p`, returning them as a flat list."""
    return then(p, many(p)).map(lambda pair: [pair[0]] + pair[1])


def skip_many(p: Parser[Any]) -> Parser[None]:
    """Skips zero or more occurrences of `p`."""
    return _many_accum(lambda item, acc: None, p, lambda: None)


def flatten(value: Any) -> Tuple[Any, ...]:
    """
    Flatten a chain of `then` pairs into one tuple.

    ``then(then(a, b), c)`` yields ``((va, vb), vc)`` and
    ``then(a, then(b, c))`` yields ``(va, (vb, vc))``; both flatten to
    ``(va, vb, vc)``. Values that are themselves tuples are flattened too, so
    prefer `sequence` when the component values may be tuples.
    """
    if not isinstance(value, tuple):
        return (value,)
    out: List[Any] = []
    for part in value:
        out.extend(flatten(part))
    return tuple(out)


def sequence(*parsers: Parser[Any]) -> Parser[Tuple[Any, ...]]:
    """Run each parser in turn, collecting the values into a flat tuple."""
    def parse(inp: Input) -> ParseResult[Tuple[Any, ...]]:
        values = []
        current = inp
        for p in parsers:
            result = p.parse_fn(current)
            if not result:
                return FAILURE
            values.append(result.value)
            current = result.remaining
        return Success(tuple(values), current)
    return Parser(parse)


def choice(parsers: List[Parser[T]]) -> Parser[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Fails if none succeed (or the list is empty).
    """
    if not parsers:
        return fail()
    result = parsers[-1]
    for p in reversed(parsers[:-1]):
        result = alt(p, result)
    return result


def option(default: T, p: Parser[T]) -> Parser[T]:
    """Returns the value of `p`, or `default` if it fails."""
    return alt(p, succeed(default))


def optional(p: Parser[T]) -> Parser[Optional[T]]:
    return option(None, p)


def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """
    Parses `open`, then `p`, then `close`, returning the result of `p`.
    """
    return (open > p) < close


def count(n: int, p: Parser[T]) -> Parser[List[T]]:
    """Parses exactly `n` occurrences of `p`."""
    if n < 0:
        raise GrammarError(f"count expects a non-negative number, got {n}")
    return sequence(*([p] * n)).map(list)


def sep_by1(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """One or more `p` separated by `sep`."""
    return then(p, many(sep > p)).map(lambda pair: [pair[0]] + pair[1])


def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """Zero or more `p` separated by `sep`."""
    return option([], sep_by1(p, sep))


def chainl1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more `p` separated by `op`, folding the operator
    functions from the left: ``1-2-3`` is ``(1-2)-3``.
    """
    def fold(pair: Tuple[T, List[Tuple[Callable[[T, T], T], T]]]) -> T:
        acc, rest = pair
        for f, rhs in rest:
            acc = f(acc, rhs)
        return acc
    return then(p, many(then(op, p))).map(fold)


def chainr1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more `p` separated by `op`, folding the operator
    functions from the right: ``2^3^2`` is ``2^(3^2)``.
    """
    def fold(pair: Tuple[T, List[Tuple[Callable[[T, T], T], T]]]) -> T:
        first, rest = pair
        if not rest:
            return first
        operands = [first] + [rhs for _, rhs in rest]
        acc = operands[-1]
        for i in range(len(rest) - 1, -1, -1):
            acc = rest[i][0](operands[i], acc)
        return acc
    return then(p, many(then(op, p))).map(fold)


def eof() -> Parser[None]:
    """Succeeds only if no input remains."""
    def parse(inp: Input) -> ParseResult[None]:
        if inp:
            return FAILURE
        return Success(None, inp)
    return Parser(parse)


def look_ahead(p: Parser[T]) -> Parser[T]:
    """Parse without consuming input."""
    def parse(inp: Input) -> ParseResult[T]:
        result = p.parse_fn(inp)
        if not result:
            return FAILURE
        return Success(result.value, inp)
    return Parser(parse)


def not_followed_by(p: Parser[Any]) -> Parser[None]:
    """Succeeds, consuming nothing, only where `p` fails."""
    def parse(inp: Input) -> ParseResult[None]:
        if p.parse_fn(inp):
            return FAILURE
        return Success(None, inp)
    return Parser(parse)


# Debugging parser that logs the upcoming input
def parser_trace(label: str) -> Parser[None]:
    def parse(inp: Input) -> ParseResult[None]:
        rest = inp.rest()
        log.debug("%s: %r%s at offset %d",
                  label, rest[:30], '...' if len(rest) > 30 else '', inp.offset)
        return Success(None, inp)
    return Parser(parse)


# Debugging parser that traces entry and backtracking of `p`
def parser_traced(label: str, p: Parser[T]) -> Parser[T]:
    backtracked = parser_trace(f"{label} backtracked") > fail()
    return parser_trace(label) > alt(p, backtracked)
