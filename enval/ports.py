"""
Typing seams for lookups.
A lookup function returns (value, present); a parse function returns the value or raises.
"""

from __future__ import annotations

from typing import Callable, Protocol, Tuple, TypeVar

T = TypeVar("T")

LookupFunc = Callable[[str], Tuple[str, bool]]
ParseFunc = Callable[[str], T]


class Config(Protocol):
    """Typed, deferred-error config interface."""

    def get_str(self, key: str) -> str: ...

    def get_str_with_default(self, key: str, default: str) -> str: ...

    def get_int(self, key: str) -> int: ...

    def get_int_with_default(self, key: str, default: int) -> int: ...

    def get_bool(self, key: str) -> bool: ...

    def get_bool_with_default(self, key: str, default: bool) -> bool: ...

    def get_float(self, key: str) -> float: ...

    def get_float_with_default(self, key: str, default: float) -> float: ...

    def check(self) -> None: ...
