"""Error type shared by every epochal operation."""

from enum import Enum


class ErrorKind(Enum):
    INVALID_EPOCH = "invalid epoch timestamp"
    INVALID_DURATION = "invalid duration"
    UNSUPPORTED_UNIT = "unsupported unit"
    INVALID_ISO = "invalid ISO-8601 timestamp"
    MISSING_TIMEZONE = "missing timezone in timestamp"
    OVERFLOW = "arithmetic overflow"


class EpochError(Exception):
    """Raised by parsing and arithmetic operations.

    Attributes:
        kind: Which of the fixed failure categories this is
        value: The offending input, if there is one
    """

    def __init__(self, kind: ErrorKind, value: str | None = None):
        self.kind: ErrorKind = kind
        self.value: str | None = value
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}: {self.value}"

    def __repr__(self) -> str:
        return f"EpochError({self.kind.name}, {self.value!r})"
