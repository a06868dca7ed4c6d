class EnvalError(RuntimeError):
    """Base error for environment lookups."""


class MissingVariableError(EnvalError):
    """Variable not present in the lookup source."""

    def __init__(self, key: str) -> None:
        super().__init__("variable missing")
        self.key = key


class UnparsableValueError(EnvalError, ValueError):
    """Variable present but its text does not convert to the requested type."""

    def __init__(self, kind: str, cause: Exception) -> None:
        super().__init__(f"unparsable {kind}: {cause}")
        self.kind = kind
        self.__cause__ = cause


class ParseError(ValueError):
    """Strict primitive parser failure (invalid syntax / value out of range)."""

    def __init__(self, func: str, text: str, reason: str) -> None:
        super().__init__(f'{func}: parsing "{text}": {reason}')
        self.func = func
        self.text = text
        self.reason = reason


class AggregateError(EnvalError):
    """
    Combined report of every variable that failed during a pass.
    Text is "<key>: <error>" per key, first-failure order, joined by ", ".
    """

    def __init__(self, errors: dict[str, Exception]) -> None:
        self.errors = dict(errors)
        super().__init__(", ".join(f"{key}: {err}" for key, err in self.errors.items()))

    @property
    def keys(self) -> list[str]:
        return list(self.errors)
