from __future__ import annotations

from typing import Any, Optional


class CodecError(Exception):
    """Base class for task codec failures."""


class DecodeError(CodecError):
    """A line could not be turned into a Task.

    ``field`` is ``None`` when the line itself is not a JSON object.
    """

    def __init__(self, field: Optional[str], raw: Any, reason: str = "") -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        where = f"field {field!r}" if field else "input"
        message = f"cannot decode {where} from {raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EncodeError(CodecError):
    """A Task holds a value JSON cannot represent."""

    def __init__(self, field: Optional[str], reason: str = "") -> None:
        self.field = field
        self.reason = reason
        where = f"field {field!r}" if field else "task"
        message = f"cannot encode {where}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
