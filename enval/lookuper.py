"""
Typed access to key/value configuration with deferred, aggregated errors.
Accessors never raise: they record the failure against the key and return a
zero value (or the default when the key is absent), so a whole configuration
pass runs to completion before ``err()`` / ``check()`` is consulted.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from .errors import AggregateError, MissingVariableError, UnparsableValueError
from .logger import get_logger
from .parsing import parse_bool, parse_float, parse_int
from .ports import LookupFunc, ParseFunc
from .sources import environ_lookup

T = TypeVar("T")
P = TypeVar("P")

log = get_logger("enval.lookuper")


class Lookuper:
    """One instance per configuration pass; not thread-safe."""

    def __init__(self, lookup_func: LookupFunc | None = None) -> None:
        self.lookup_func: LookupFunc = lookup_func or environ_lookup
        self.errors_by_key: dict[str, Exception] = {}
        self.keys_with_errors: list[str] = []

    def get_str(self, key: str) -> str:
        val, present = self.lookup_func(key)
        if not present:
            self._add_error(key, MissingVariableError(key))
            return ""
        return val

    def get_str_with_default(self, key: str, default: str) -> str:
        val, present = self.lookup_func(key)
        if not present:
            return default
        return val

    def get_int(self, key: str) -> int:
        return self._primitive(key, "int", parse_int, 0)

    def get_int_with_default(self, key: str, default: int) -> int:
        return self._primitive_with_default(key, "int", parse_int, 0, default)

    def get_bool(self, key: str) -> bool:
        return self._primitive(key, "bool", parse_bool, False)

    def get_bool_with_default(self, key: str, default: bool) -> bool:
        return self._primitive_with_default(key, "bool", parse_bool, False, default)

    def get_float(self, key: str) -> float:
        return self._primitive(key, "float", parse_float, 0.0)

    def get_float_with_default(self, key: str, default: float) -> float:
        return self._primitive_with_default(key, "float", parse_float, 0.0, default)

    def get_custom(self, key: str, parse: ParseFunc[T]) -> T | None:
        """
        Parses the value with ``parse``. Whatever ``parse`` raises is recorded
        as-is (no prefix) and ``None`` is returned.
        """
        val, present = self.lookup_func(key)
        if not present:
            self._add_error(key, MissingVariableError(key))
            return None
        return self._parse_custom(key, val, parse)

    def get_custom_with_default(self, key: str, default: T, parse: ParseFunc[T]) -> T | None:
        """Default only covers absence; a parse failure still yields ``None``."""
        val, present = self.lookup_func(key)
        if not present:
            return default
        return self._parse_custom(key, val, parse)

    @property
    def has_errors(self) -> bool:
        return bool(self.keys_with_errors)

    def err(self) -> AggregateError | None:
        """Combined error for every failed key in first-failure order, or None."""
        if not self.keys_with_errors:
            return None
        return AggregateError({key: self.errors_by_key[key] for key in self.keys_with_errors})

    def check(self) -> None:
        """Raises the combined error, if any."""
        err = self.err()
        if err is None:
            return
        log.warning("configuration invalid", extra={"keys": err.keys})
        raise err

    def _primitive(self, key: str, kind: str, parse: Callable[[str], P], zero: P) -> P:
        val, present = self.lookup_func(key)
        if not present:
            self._add_error(key, MissingVariableError(key))
            return zero
        return self._parse_primitive(key, val, kind, parse, zero)

    def _primitive_with_default(self, key: str, kind: str, parse: Callable[[str], P], zero: P, default: P) -> P:
        val, present = self.lookup_func(key)
        if not present:
            return default
        return self._parse_primitive(key, val, kind, parse, zero)

    def _parse_primitive(self, key: str, val: str, kind: str, parse: Callable[[str], P], zero: P) -> P:
        try:
            return parse(val)
        except ValueError as e:
            self._add_error(key, UnparsableValueError(kind, e))
            return zero

    def _parse_custom(self, key: str, val: str, parse: ParseFunc[T]) -> T | None:
        try:
            return parse(val)
        except Exception as e:
            self._add_error(key, e)
            return None

    def _add_error(self, key: str, err: Exception) -> None:
        # a repeated failure replaces the earlier error but keeps the key's position
        if key not in self.errors_by_key:
            self.keys_with_errors.append(key)
        self.errors_by_key[key] = err
        log.debug("variable error recorded", extra={"key": key, "kind": type(err).__name__})
