"""Typed errors raised by the plain-PPM codec."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    READ_ERROR = "ReadError"
    MISSING_HEADER_LINE = "MissingHeaderLine"
    INVALID_NUMBER = "InvalidNumber"
    BODY_LENGTH_MISMATCH = "BodyLengthMismatch"
    WRITE_ERROR = "WriteError"


class PpmError(Exception):
    def __init__(self, kind: ErrorKind, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.kind.value}: {self.message} ({self.path})"
        return f"{self.kind.value}: {self.message}"


class DecodeError(PpmError):
    pass


class EncodeError(PpmError):
    pass
