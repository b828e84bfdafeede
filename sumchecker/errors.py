"""
Error kinds raised while validating files against a checksum manifest.

Each error is tagged with an :class:`ErrorKind` so callers can branch on
``error.kind`` as well as on the exception type. Filesystem failures and
unsupported digest algorithms are not represented here; they surface as the
native ``OSError``/``ValueError`` raised by the standard library.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminator shared by all validator errors."""

    PARSE = "parse"
    NO_CHECKSUM = "no_checksum"
    MISMATCH = "mismatch"


class SumcheckerError(Exception):
    """Common base for manifest and validation failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ChecksumParseError(SumcheckerError):
    """A manifest line did not match the checksum line format."""

    kind = ErrorKind.PARSE

    def __init__(self, line_number: int, line: str):
        super().__init__(f"Could not parse checksum file at line {line_number}: {line}")
        self.line_number = line_number
        self.line = line


class NoChecksumFoundError(SumcheckerError):
    """A requested file has no entry in the manifest."""

    kind = ErrorKind.NO_CHECKSUM

    def __init__(self, filename: str):
        super().__init__(f'No checksum found in checksum file for "{filename}".')
        self.filename = filename


class ChecksumMismatchError(SumcheckerError):
    """The generated digest differs from the one recorded in the manifest."""

    kind = ErrorKind.MISMATCH

    def __init__(self, filename: str):
        super().__init__(f'Generated checksum for "{filename}" did not match expected checksum.')
        self.filename = filename


__all__ = [
    "ErrorKind",
    "SumcheckerError",
    "ChecksumParseError",
    "NoChecksumFoundError",
    "ChecksumMismatchError",
]
