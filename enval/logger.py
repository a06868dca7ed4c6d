import json
import logging
import sys
import time
from typing import IO, Any

from .ports import Config

ROOT_LOGGER = "enval"

_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """JSON log formatter, one object per line."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger namespaced under ``enval``."""
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(
    config: Config | None = None,
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    Installs a single stdout handler on the ``enval`` logger.
    Settings come from ENVAL_LOG_LEVEL / ENVAL_LOG_FORMAT / ENVAL_LOG_UTC unless
    passed explicitly; all invalid settings are reported together.
    """
    if config is None:
        from .lookuper import Lookuper

        config = Lookuper()

    level_str = (level if level is not None else config.get_str_with_default("ENVAL_LOG_LEVEL", "INFO")).upper()
    fmt_str = (fmt if fmt is not None else config.get_str_with_default("ENVAL_LOG_FORMAT", "plain")).lower()
    use_utc = utc if utc is not None else config.get_bool_with_default("ENVAL_LOG_UTC", True)
    config.check()

    level_value = logging.getLevelName(level_str)
    if not isinstance(level_value, int):
        raise ValueError(f"unknown log level: {level_str}")
    if fmt_str not in {"plain", "json"}:
        raise ValueError(f"unknown log format: {fmt_str}")

    log = logging.getLogger(ROOT_LOGGER)
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(level_value)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))
    log.addHandler(handler)

    log.debug("logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc})
    return log
