# tests/conftest.py
import pytest

from pycombinator.Parser import Failure, Input, ParseResult, Success


def _assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    if isinstance(res1, Success):
        assert isinstance(res2, Success), "Result mismatch: Success vs Failure"
        assert res1.value == res2.value
        assert res1.remaining.offset == res2.remaining.offset
        assert res1.remaining.rest() == res2.remaining.rest()
    else:
        assert isinstance(res1, Failure)
        assert isinstance(res2, Failure), "Result mismatch: Failure vs Success"


def _assert_success(result: ParseResult, value, rest):
    assert isinstance(result, Success), f"expected a match, got {result!r}"
    assert result.value == value
    assert result.remaining.rest() == rest


# Session scoped so hypothesis @given tests can request them.
@pytest.fixture(scope="session")
def assert_result_eq():
    return _assert_result_eq


@pytest.fixture(scope="session")
def assert_success():
    return _assert_success


@pytest.fixture
def initial_input():
    def _make(data, offset=0):
        return Input(data, offset)

    return _make
