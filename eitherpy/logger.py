from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any

from .either import json_default


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _log_default(o: Any) -> Any:
    # records must always serialize; the reader input can be anything
    try:
        return json_default(o)
    except TypeError:
        return repr(o)


class ConsoleLogger:
    """Structured logger writing one line per record to stderr.

    Either values passed as fields are written as their inner value in JSON
    mode and as ``Left(...)``/``Right(...)`` in plain mode. Values JSON can't
    encode are written as their ``repr``.
    """

    def __init__(self, name: str = "eitherpy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level_name = level.upper() if level.upper() in _LEVELS else "INFO"
        self.json_output = json_output
        self.context: Dict[str, Any] = {**(context or {})}

    @property
    def level(self) -> int:
        return _LEVELS[self.level_name]

    def set_level(self, level: str) -> None:
        # unknown names leave the current level in place
        if level.upper() in _LEVELS:
            self.level_name = level.upper()

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(self.name, self.level_name, self.json_output, {**self.context, **fields})

    def _render(self, ts: str, level: str, msg: str, fields: Dict[str, Any]) -> str:
        if self.json_output:
            record: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if fields:
                record["fields"] = fields
            return json.dumps(record, separators=(",", ":"), default=_log_default)
        extras = "".join(f" {k}={v}" for k, v in sorted(fields.items()))
        return f"[{ts}] {self.name} {level}: {msg}{extras}"

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if _LEVELS[level] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        print(self._render(ts, level, msg, {**self.context, **fields}), file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)
