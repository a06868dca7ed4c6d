from __future__ import annotations

import re
from typing import Any, TypeVar

from pydantic import TypeAdapter

from .errors import ParseError
from .ports import ParseFunc

T = TypeVar("T")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def parse_int(text: str) -> int:
    """Parses a base-10 signed 64-bit integer; no whitespace, underscores or non-ASCII digits."""
    if not _INT_RE.fullmatch(text):
        raise ParseError("parse_int", text, "invalid syntax")
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise ParseError("parse_int", text, "value out of range")
    return value


def parse_bool(text: str) -> bool:
    """Parses 1/t/T/TRUE/true/True and 0/f/F/FALSE/false/False."""
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise ParseError("parse_bool", text, "invalid syntax")


def parse_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ParseError("parse_float", text, "invalid syntax")
    value = float(text)
    if value in (float("inf"), float("-inf")) and "inf" not in text.lower():
        raise ParseError("parse_float", text, "value out of range")
    return value


def adapter_parser(tp: type[T] | Any) -> ParseFunc[T]:
    """
    Returns a parse function validating the raw string against ``tp``
    with pydantic's lax coercion (e.g. "3" -> 3, "yes" -> True, "a,b" stays a str).
    """
    adapter: TypeAdapter[T] = TypeAdapter(tp)

    def parse(raw: str) -> T:
        return adapter.validate_python(raw)

    return parse


def json_parser(tp: type[T] | Any) -> ParseFunc[T]:
    """Returns a parse function decoding JSON text into ``tp``."""
    adapter: TypeAdapter[T] = TypeAdapter(tp)

    def parse(raw: str) -> T:
        return adapter.validate_json(raw)

    return parse
