import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pycombinator.Parser import FAILURE, Failure, GrammarError, Input, Parser, Success
from pycombinator.Prim import forward, fail, item, lazy, literal, run_parser, satisfy, succeed


# --- succeed / fail ---

@given(st.integers() | st.text(), st.text())
def test_succeed_consumes_nothing(assert_success, v, text):
    res = run_parser(succeed(v), text)
    assert_success(res, v, text)


@given(st.text())
def test_fail_always_fails(text):
    res = run_parser(fail(), text)
    assert isinstance(res, Failure)
    assert not res
    assert res == FAILURE


# --- item ---

def test_item_empty_input():
    assert not run_parser(item(), "")


@given(st.text(min_size=1))
def test_item_consumes_one(assert_success, text):
    assert_success(run_parser(item(), text), text[0], text[1:])


# --- satisfy / literal ---

def test_literal_match(assert_success):
    # literal('a') on "abc" -> 'a', rest "bc"
    assert_success(run_parser(literal("a"), "abc"), "a", "bc")


def test_satisfy_rejects_without_consuming():
    res = run_parser(satisfy(str.isdigit), "abc")
    assert res == FAILURE


def test_satisfy_empty_input():
    calls = []
    p = satisfy(lambda c: calls.append(c) or True)
    assert not run_parser(p, "")
    assert calls == []


def test_satisfy_requires_callable():
    with pytest.raises(GrammarError):
        satisfy("a")


@given(st.characters(), st.text())
def test_satisfy(assert_success, c, text):
    p = satisfy(lambda x: x == c)
    res = run_parser(p, text)
    if text.startswith(c):
        assert_success(res, c, text[1:])
    else:
        assert not res


# --- Input types ---

def test_bytes_input():
    res = run_parser(literal(ord("A")), b"ABC")
    assert res.value == ord("A")
    assert res.remaining.rest() == b"BC"


def test_list_of_tokens():
    stream = [("ID", "x"), ("OP", "="), ("NUM", "1")]

    def kind(k):
        return satisfy(lambda t: t[0] == k).map(lambda t: t[1])

    p = (kind("ID") & kind("OP")) & kind("NUM")
    res = run_parser(p, stream)
    assert res.value == (("x", "="), "1")
    assert res.remaining.rest() == []


def test_remaining_shares_source():
    text = "abc"
    res = item()(text)
    assert res.remaining.source is text
    assert res.remaining == Input(text, 1)
    assert len(res.remaining) == 2


def test_parser_accepts_input_view(initial_input, assert_success):
    res = literal("b")(initial_input("abc", 1))
    assert_success(res, "b", "c")


def test_parser_requires_callable_body():
    with pytest.raises(GrammarError):
        Parser(42)


# --- lazy / forward ---

def test_lazy_builds_once():
    built = []

    def make():
        built.append(1)
        return literal("a")

    p = lazy(make)
    assert built == []
    assert run_parser(p, "a").value == "a"
    assert run_parser(p, "b") == FAILURE
    assert built == [1]


def test_lazy_is_thread_safe():
    built = []

    def make():
        built.append(1)
        return item()

    p = lazy(make)
    results = []
    threads = [threading.Thread(target=lambda: results.append(p("xy").value)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == ["x"] * 8
    assert built == [1]


def test_forward_self_reference(assert_success):
    # nested ::= "(" nested ")" | ""
    nested = forward()
    nested.define(
        ((literal("(") > nested) < literal(")")).map(lambda depth: depth + 1) | succeed(0)
    )
    assert_success(run_parser(nested, "((()))x"), 3, "x")
    assert_success(run_parser(nested, "(()"), 0, "(()")


def test_forward_undefined():
    p = forward()
    with pytest.raises(GrammarError):
        p("a")


def test_forward_defined_twice():
    p = forward()
    p.define(item())
    with pytest.raises(GrammarError):
        p.define(item())


def test_success_is_truthy():
    assert Success(None, Input(""))
    assert not Failure()


def test_define_requires_forward():
    with pytest.raises(GrammarError):
        item().define(literal("a"))
