import sys

import pytest

from pycombinator.Combinators import alt, many, some, then
from pycombinator.Parser import InfiniteRepetitionError
from pycombinator.Prim import forward, lazy, literal, run_parser, succeed
from pycombinator.Token import symbol


def test_stack_safety():
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    try:
        n = 5000
        input_str = "a" * n
        res = run_parser(many(literal("a")), input_str)
        assert len(res.value) == n
        assert res.remaining.rest() == ""
        assert len(run_parser(some(literal("a")), input_str).value) == n
    finally:
        sys.setrecursionlimit(limit)


def test_recursive_list_with_lazy():
    # items ::= "[" (items)* "]"   -- returns nesting as python lists
    def items():
        return then(then(symbol("["), many(lazy(items))), symbol("]")).map(lambda t: t[0][1])

    res = run_parser(items(), "[ [] [[ ]] ]")
    assert res.value == [[], [[]]]


def test_mutual_recursion_with_forward():
    # even ::= "a" odd | ""      odd ::= "a" even
    even = forward()
    odd = forward()
    even.define(alt(then(literal("a"), odd).map(lambda t: "even"), succeed("even")))
    odd.define(then(literal("a"), even).map(lambda t: "odd"))

    assert run_parser(even, "aaaa").remaining.rest() == ""
    assert run_parser(odd, "aaa").value == "odd"
    assert not run_parser(odd, "")


def test_zero_width_repetition_is_reported():
    with pytest.raises(InfiniteRepetitionError):
        run_parser(some(succeed(1)), "")
