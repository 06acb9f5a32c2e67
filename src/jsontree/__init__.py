"""
Combinator-based parser for JSON-like text into a typed value tree.

`parse` returns the decoded tree together with whatever input it did not
consume; `loads` and `load` additionally require the whole document to be a
single value and return plain Python objects.
"""

import logging
from typing import IO
from typing import Any

import parsy

from ._config import ParseConfig
from ._errors import ErrorKind
from ._errors import ParseError
from ._grammar import CommittedFailure
from ._grammar import expecting
from ._grammar import failure_kind
from ._grammar import grammar_for
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._value import NULL
from ._value import Array
from ._value import Boolean
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value
from ._value import to_python

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def parse(text: str, config: ParseConfig | None = None) -> tuple[str, Value]:
    """
    Parses one value from the start of `text`.

    Whitespace around the value is skipped. Returns the unconsumed remainder
    and the value tree; checking that the remainder is empty is left to the
    caller. Raises `ParseError` when no value can be parsed.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the document must be str, not {type(text).__name__}"
        )

    grammar = grammar_for(config or ParseConfig())
    try:
        value, remaining = grammar.document.parse_partial(text)
    except parsy.ParseError as e:
        logger.debug("No value at %d: expected %s", e.index, e.expected)
        raise ParseError(
            expecting(e.expected), text, e.index, failure_kind(text, e.index)
        ) from None
    except CommittedFailure as e:
        logger.debug(
            "Parse failed at %d (%s): %s", e.pos, e.kind.value, e.message
        )
        raise ParseError(e.message, text, e.pos, e.kind, e.contexts) from None
    return remaining, value


def loads(s: str, **kwargs: Any) -> Any:
    """
    Parses a complete document into plain Python objects.

    Keyword arguments build the `ParseConfig`. Anything but whitespace after
    the value is rejected as extra data.
    """
    config = ParseConfig(**kwargs)
    remaining, value = parse(s, config)
    if remaining:
        pos = len(s) - len(remaining)
        logger.debug("Rejecting %d characters of extra data", len(remaining))
        raise ParseError("Extra data", s, pos)
    return to_python(value)


def load(fp: IO[str], **kwargs: Any) -> Any:
    """
    Parses a complete document from a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "NULL",
    "Array",
    "Boolean",
    "ErrorKind",
    "HotPathStats",
    "Null",
    "Number",
    "Object",
    "ParseConfig",
    "ParseError",
    "String",
    "Value",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "to_python",
]
