import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


class PyCombinatorError(Exception):
    """Base class for misuse of the library (never raised for a plain non-match)."""


class GrammarError(PyCombinatorError):
    """A parser was constructed or wired up incorrectly."""


class InfiniteRepetitionError(GrammarError):
    """A repeated parser succeeded without consuming input."""


@dataclass(frozen=True)
class Input:
    """
    An immutable view of the unconsumed suffix of a sequence.

    The backing sequence is shared between all views; advancing only
    produces a new offset, so no copy of the input is ever made.
    """
    source: Sequence[Any]
    offset: int = 0

    def __len__(self) -> int:
        return len(self.source) - self.offset

    def __bool__(self) -> bool:
        return self.offset < len(self.source)

    def peek(self) -> Any:
        """Return the next symbol. The view must not be empty."""
        return self.source[self.offset]

    def advance(self, n: int = 1) -> 'Input':
        return Input(self.source, self.offset + n)

    def rest(self) -> Sequence[Any]:
        """Materialise the remaining suffix ("bc" for "abc" after one symbol)."""
        return self.source[self.offset:]

    def __str__(self) -> str:
        return repr(self.rest())


def as_input(data: Union[Input, Sequence[Any]]) -> Input:
    if isinstance(data, Input):
        return data
    return Input(data)


@dataclass(frozen=True)
class Success(Generic[T]):
    """The parser matched a (possibly empty) prefix and produced `value`."""
    value: T
    remaining: Input

    def __bool__(self) -> bool:
        return True


class Failure:
    """The parser did not match. Carries no value and no remaining input."""
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Failure()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Failure)

    def __hash__(self) -> int:
        return hash(Failure)


FAILURE = Failure()

ParseResult = Union[Success[T], Failure]


class ForwardCell:
    """The body of a forward-declared parser; resolved once by `Parser.define`."""
    __slots__ = ('target', '_lock')

    def __init__(self) -> None:
        self.target: Optional['Parser[Any]'] = None
        self._lock = threading.Lock()

    def resolve(self, parser: 'Parser[Any]') -> None:
        with self._lock:
            if self.target is not None:
                raise GrammarError("forward parser is already defined")
            self.target = parser

    def __call__(self, inp: Input) -> 'ParseResult[Any]':
        target = self.target
        if target is None:
            raise GrammarError("forward parser used before define() was called")
        return target.parse_fn(inp)


class Parser(Generic[T]):
    """A parser combinator that processes input and returns a result."""
    __slots__ = ('parse_fn',)

    def __init__(self, parse_fn: Callable[[Input], ParseResult[T]]):
        if not callable(parse_fn):
            raise GrammarError(f"parser body must be callable, got {parse_fn!r}")
        self.parse_fn = parse_fn

    def __call__(self, data: Union[Input, Sequence[Any]]) -> ParseResult[T]:
        return self.parse_fn(as_input(data))

    def define(self, parser: 'Parser[T]') -> 'Parser[T]':
        """Give a parser created by `forward()` its definition."""
        if not isinstance(self.parse_fn, ForwardCell):
            raise GrammarError("only a parser created by forward() can be defined")
        self.parse_fn.resolve(parser)
        return self

    # Functor map (using)
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        if not callable(f):
            raise GrammarError(f"map expects a callable, got {f!r}")

        def parse(inp: Input) -> ParseResult[U]:
            result = self.parse_fn(inp)
            if not result:
                return FAILURE
            return Success(f(result.value), result.remaining)
        return Parser(parse)

    using = map

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        if not callable(f):
            raise GrammarError(f"bind expects a callable, got {f!r}")

        def parse(inp: Input) -> ParseResult[U]:
            result = self.parse_fn(inp)
            if not result:
                return FAILURE
            return f(result.value).parse_fn(result.remaining)
        return Parser(parse)

    # Ordered choice (<|>)
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        def parse(inp: Input) -> ParseResult[T]:
            result = self.parse_fn(inp)
            if result:
                return result
            # Failure never consumes, so `other` sees the original input
            return other.parse_fn(inp)
        return Parser(parse)

    # Sequence, pairing both values
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        def parse(inp: Input) -> ParseResult[Tuple[T, U]]:
            first = self.parse_fn(inp)
            if not first:
                return FAILURE
            second = other.parse_fn(first.remaining)
            if not second:
                return FAILURE
            return Success((first.value, second.value), second.remaining)
        return Parser(parse)

    # Sequence (*>), keep the right value
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return (self & other).map(lambda pair: pair[1])

    # Sequence (<*), keep the left value
    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        return (self & other).map(lambda pair: pair[0])

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.bind(f)
