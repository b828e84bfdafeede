"""
Option and configuration dataclasses for checksum validation.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger("sumchecker.config.options")

DEFAULT_TEXT_ENCODING = "utf8"
DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class ChecksumOptions:
    """Caller-supplied options for a validator."""

    default_text_encoding: str = DEFAULT_TEXT_ENCODING
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Resolved settings of a single validator instance."""

    algorithm: str
    manifest_path: str
    default_text_encoding: str = DEFAULT_TEXT_ENCODING
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def build(
        cls,
        algorithm: str,
        manifest_path: str,
        options: Optional[ChecksumOptions] = None,
    ) -> "ValidatorConfig":
        opts = options or ChecksumOptions()
        return cls(
            algorithm=algorithm,
            manifest_path=manifest_path,
            default_text_encoding=opts.default_text_encoding or DEFAULT_TEXT_ENCODING,
            chunk_size=opts.chunk_size,
        )


def options_from_env() -> ChecksumOptions:
    """Build options from ``SUMCHECKER_*`` environment variables (and ``.env``)."""

    load_dotenv()
    encoding = os.getenv("SUMCHECKER_DEFAULT_TEXT_ENCODING") or DEFAULT_TEXT_ENCODING

    chunk_size = DEFAULT_CHUNK_SIZE
    raw = os.getenv("SUMCHECKER_CHUNK_SIZE")
    if raw:
        try:
            chunk_size = int(raw)
        except ValueError:
            logger.warning("Invalid integer for SUMCHECKER_CHUNK_SIZE: %r. Using %d.", raw, DEFAULT_CHUNK_SIZE)
        else:
            if chunk_size <= 0:
                logger.warning("SUMCHECKER_CHUNK_SIZE must be positive, got %d. Using %d.", chunk_size, DEFAULT_CHUNK_SIZE)
                chunk_size = DEFAULT_CHUNK_SIZE

    return ChecksumOptions(default_text_encoding=encoding, chunk_size=chunk_size)


__all__ = [
    "ChecksumOptions",
    "ValidatorConfig",
    "DEFAULT_TEXT_ENCODING",
    "DEFAULT_CHUNK_SIZE",
    "options_from_env",
]
