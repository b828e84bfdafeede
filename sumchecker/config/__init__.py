"""
Configuration for sumchecker validators.
"""

from .options import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_TEXT_ENCODING,
    ChecksumOptions,
    ValidatorConfig,
    options_from_env,
)

__all__ = [
    "ChecksumOptions",
    "ValidatorConfig",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_TEXT_ENCODING",
    "options_from_env",
]
