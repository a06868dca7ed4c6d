from .errors import (
    AggregateError,
    EnvalError,
    MissingVariableError,
    ParseError,
    UnparsableValueError,
)
from .logger import JsonFormatter, PlainFormatter, configure_logging, get_logger
from .lookuper import Lookuper
from .parsing import adapter_parser, json_parser, parse_bool, parse_float, parse_int
from .ports import Config, LookupFunc, ParseFunc
from .sources import environ_lookup, mapping_lookup, prefixed_lookup

__version__ = "1.0.0"

__all__ = [
    "Lookuper",
    "Config",
    "LookupFunc",
    "ParseFunc",
    "EnvalError",
    "MissingVariableError",
    "UnparsableValueError",
    "ParseError",
    "AggregateError",
    "parse_int",
    "parse_bool",
    "parse_float",
    "adapter_parser",
    "json_parser",
    "environ_lookup",
    "mapping_lookup",
    "prefixed_lookup",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
]
