"""
sumchecker package bootstrap.

Checks files against checksum manifests in the format written by tools such
as ``sha256sum``. Exposes the validator, its options and the error kinds it
raises.
"""

from importlib import metadata

from sumchecker.config.options import ChecksumOptions, ValidatorConfig, options_from_env
from sumchecker.errors import (
    ChecksumMismatchError,
    ChecksumParseError,
    ErrorKind,
    NoChecksumFoundError,
    SumcheckerError,
)
from sumchecker.manifest import Manifest, ManifestEntry, parse_manifest
from sumchecker.services.validator import ChecksumValidator, validate, validate_sync


def get_version() -> str:
    """Return the package version if installed, else '0.0.0'."""
    try:
        return metadata.version("sumchecker")
    except metadata.PackageNotFoundError:  # pragma: no cover - best effort only
        return "0.0.0"


__all__ = [
    "ChecksumMismatchError",
    "ChecksumOptions",
    "ChecksumParseError",
    "ChecksumValidator",
    "ErrorKind",
    "Manifest",
    "ManifestEntry",
    "NoChecksumFoundError",
    "SumcheckerError",
    "ValidatorConfig",
    "get_version",
    "options_from_env",
    "parse_manifest",
    "validate",
    "validate_sync",
]
