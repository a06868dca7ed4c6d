import os
from typing import Mapping

from .ports import LookupFunc


def environ_lookup(key: str) -> tuple[str, bool]:
    """Reads the process environment at call time."""
    value = os.environ.get(key)
    if value is None:
        return "", False
    return value, True


def mapping_lookup(mapping: Mapping[str, str]) -> LookupFunc:
    """Lookup over a fixed mapping (tests, pre-collected values)."""

    def lookup(key: str) -> tuple[str, bool]:
        if key in mapping:
            return mapping[key], True
        return "", False

    return lookup


def prefixed_lookup(lookup: LookupFunc, prefix: str) -> LookupFunc:
    """Prepends ``prefix`` to every key before delegating."""

    def prefixed(key: str) -> tuple[str, bool]:
        return lookup(f"{prefix}{key}")

    return prefixed
