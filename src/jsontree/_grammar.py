"""
The document grammar, built from parsy combinators.

Value, array and object are mutually recursive: `Grammar` declares the value
parser with `forward_declaration()` and fills it in once the containers
exist.

parsy failures are soft: `alt` tries the next alternative. Once a construct
is past its opening token the grammar commits, and any later failure is
raised as `CommittedFailure`. That aborts the whole parse and collects
construct labels on the way out.

The sub-parsers of the default configuration are exported at module level
(`null`, `boolean`, `number`, `string`, `array`, `object`, `value`) so each
can be exercised on its own.
"""

import functools
import logging
import math
import struct
from collections.abc import Iterable
from contextvars import ContextVar
from typing import Any

import parsy
from parsy import Parser
from parsy import Result
from parsy import alt
from parsy import any_char
from parsy import forward_declaration
from parsy import generate
from parsy import regex

from ._config import ParseConfig
from ._errors import ErrorKind
from ._errors import Position
from ._profile import ProfileContext
from ._value import FALSE
from ._value import NULL
from ._value import TRUE
from ._value import Array
from ._value import Number
from ._value import Object
from ._value import String

logger = logging.getLogger(__name__)

# Optional sign, digits with optional fraction (or a bare fraction), then an
# exponent only when digits follow the marker
FLOAT_PATTERN = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"

_SIMPLE_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)

# Containers entered by the running parse
_depth: ContextVar[int] = ContextVar("jsontree_depth", default=0)


class CommittedFailure(Exception):
    """
    A failure after the grammar committed to a construct.

    `contexts` lists the labels of enclosing constructs, innermost first,
    and grows as the failure propagates outwards.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        pos: Position,
        contexts: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.pos = pos
        self.contexts = contexts


def expecting(expected: Iterable[str]) -> str:
    """Formats parsy's expected descriptions as a failure message."""
    return "Expecting " + " or ".join(sorted(expected))


def failure_kind(stream: str, pos: Position) -> ErrorKind:
    """A missing token at end of input is a truncation."""
    return ErrorKind.TRUNCATED if pos >= len(stream) else ErrorKind.SYNTAX


def token(text: str) -> Parser:
    """Matches `text`, named by its quoted form in failures."""
    return parsy.string(text).desc(f"'{text}'")


def lexeme(parser: Parser) -> Parser:
    return parser << whitespace


def commit(parser: Parser) -> Parser:
    """Raises any failure of `parser` as a `CommittedFailure`."""

    @Parser
    def committed(stream: str, index: int) -> Result:
        result = parser(stream, index)
        if not result.status:
            raise CommittedFailure(
                failure_kind(stream, result.furthest),
                expecting(result.expected),
                result.furthest,
            )
        return result

    return committed


def labelled(label: str, parser: Parser) -> Parser:
    """Adds `label` to committed failures raised inside `parser`."""

    @Parser
    def labelled_parser(stream: str, index: int) -> Result:
        try:
            return parser(stream, index)
        except CommittedFailure as failure:
            failure.contexts = (*failure.contexts, label)
            raise

    return labelled_parser


def nested(parser: Parser) -> Parser:
    """
    Runs `parser` one container level deeper.

    Running out of interpreter stack is reported as a nesting failure at
    the container that could not be entered.
    """

    @Parser
    def nested_parser(stream: str, index: int) -> Result:
        depth = _depth.set(_depth.get() + 1)
        try:
            return parser(stream, index)
        except RecursionError:
            raise CommittedFailure(
                ErrorKind.TOO_DEEP, "Maximum nesting depth exceeded", index
            ) from None
        finally:
            _depth.reset(depth)

    return nested_parser


def depth_guard(max_depth: int | None) -> Parser:
    """Fails once the current container is nested beyond `max_depth`."""

    @Parser
    def guard(stream: str, index: int) -> Result:
        if max_depth is not None and _depth.get() > max_depth:
            raise CommittedFailure(
                ErrorKind.TOO_DEEP,
                f"Maximum nesting depth of {max_depth} exceeded",
                index,
            )
        return Result.success(index, None)

    return guard


def profiled(name: str, parser: Parser, enabled: bool) -> Parser:
    """Records hot path statistics for `parser` when `enabled`."""
    if not enabled:
        return parser

    @Parser
    def profiled_parser(stream: str, index: int) -> Result:
        with ProfileContext(name) as profile:
            result = parser(stream, index)
            if result.status:
                profile.chars = result.index - index
        return result

    return profiled_parser


whitespace = regex(r"[ \t\n\r]*")


def _unescape(c: str) -> str:
    # Unknown escapes stand for the character itself
    return _SIMPLE_ESCAPES.get(c, c)


def _to_single_precision(number: float) -> float:
    """Rounds to the nearest IEEE-754 binary32 value."""
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.inf if number > 0 else -math.inf


_null = parsy.string("null").result(NULL)
_boolean = alt(
    parsy.string("true").result(TRUE),
    parsy.string("false").result(FALSE),
)
_hex4 = regex(r"[0-9a-fA-F]{4}").map(lambda digits: int(digits, 16))
_low_surrogate_escape = parsy.string("\\u") >> _hex4
_float_literal = regex(FLOAT_PATTERN).desc("number")
_plain_run = regex(r'[^"\\]+')
_quote = parsy.string('"')


@Parser
def _unicode_escape(stream: str, index: int) -> Result:
    """Decodes the four hex digits after `\\u`, pairing surrogates."""
    start = index - 2
    digits = _hex4(stream, index)
    if not digits.status:
        raise CommittedFailure(
            ErrorKind.MALFORMED_ESCAPE,
            "Invalid \\u escape: expecting 4 hex digits",
            start,
        )

    code_point = digits.value
    if code_point in _HIGH_SURROGATES:
        low = _low_surrogate_escape(stream, digits.index)
        if low.status and low.value in _LOW_SURROGATES:
            combined = (
                0x10000 + ((code_point - 0xD800) << 10) + (low.value - 0xDC00)
            )
            return Result.success(low.index, chr(combined))
    if code_point in _HIGH_SURROGATES or code_point in _LOW_SURROGATES:
        raise CommittedFailure(
            ErrorKind.MALFORMED_ESCAPE,
            f"Invalid \\u escape: unpaired surrogate U+{code_point:04X}",
            start,
        )
    return Result.success(digits.index, chr(code_point))


_escape = parsy.string("\\") >> (
    (parsy.string("u") >> _unicode_escape) | any_char.map(_unescape)
)
_string_chunks = (_plain_run | _escape).many()
_closing_quote = _quote.optional()


@generate
def _quoted() -> Any:
    start = yield parsy.index
    yield _quote
    chunks = yield _string_chunks
    # The chunks stop only at a closing quote or at end of input
    if (yield _closing_quote) is None:
        raise CommittedFailure(
            ErrorKind.TRUNCATED, "Unterminated string starting at", start
        )
    return "".join(chunks)


string_literal = labelled("string", _quoted.desc("string"))

_open_array = lexeme(token("["))
_close_empty_array = token("]").optional()
_array_separator = commit(token(",") | token("]"))
_open_object = lexeme(token("{"))
_close_empty_object = token("}").optional()
_object_separator = commit(lexeme(token(",")) | token("}"))
_key_separator = commit(lexeme(token(":")))


class Grammar:
    """
    Builds every sub-parser for one `ParseConfig`.

    Use `grammar_for()` to share grammars between calls with equal configs.
    """

    def __init__(self, config: ParseConfig | None = None) -> None:
        self.config = config or ParseConfig()
        profile = self.config.profile
        guard = depth_guard(self.config.max_depth)

        self.value = forward_declaration()
        element = commit(self.value)

        self.null = profiled("null", _null, profile)
        self.boolean = profiled("boolean", _boolean, profile)
        self.number = profiled("number", Parser(self._number), profile)
        self.string_literal = profiled("string", string_literal, profile)
        self.string = self.string_literal.map(String)

        @generate
        def array() -> Any:
            yield _open_array
            yield guard
            if (yield _close_empty_array) is not None:
                return Array(())
            items = []
            while True:
                items.append((yield element))
                if (yield _array_separator) == "]":
                    return Array(tuple(items))

        self.array = labelled("array", nested(array))

        key = commit(
            lexeme(self.string_literal).desc(
                "property name enclosed in double quotes"
            )
        )

        @generate
        def member() -> Any:
            name = yield key
            yield _key_separator
            return name, (yield element)

        self.member = labelled("object item", member)

        @generate
        def object_() -> Any:
            yield _open_object
            yield guard
            if (yield _close_empty_object) is not None:
                return Object({})
            members = {}
            while True:
                name, item = yield self.member
                members[name] = item
                if (yield _object_separator) == "}":
                    return Object(members)

        self.object = labelled("object", nested(object_))

        dispatch = alt(
            self.null,
            self.boolean,
            self.number,
            self.string,
            self.array,
            self.object,
        ).desc("value")

        @generate
        def value() -> Any:
            yield whitespace
            parsed = yield dispatch
            yield whitespace
            return parsed

        self.value.become(value)
        self.document = profiled("parse", self.value, profile)

    def _number(self, stream: str, index: int) -> Result:
        literal = _float_literal(stream, index)
        if not literal.status:
            return literal
        number = float(literal.value)
        if self.config.single_precision:
            number = _to_single_precision(number)
        if not math.isfinite(number):
            raise CommittedFailure(
                ErrorKind.SYNTAX, f"Number out of range: {literal.value}", index
            )
        return Result.success(literal.index, Number(number))


@functools.lru_cache(maxsize=16)
def grammar_for(config: ParseConfig) -> Grammar:
    """Returns the shared grammar for `config`."""
    logger.debug("Building grammar for %r", config)
    return Grammar(config)


_default = grammar_for(ParseConfig())

null = _default.null
boolean = _default.boolean
number = _default.number
string = _default.string
array = _default.array
object = _default.object  # noqa: A001
value = _default.value
