"""Helper utilities shared across sumchecker components."""

from .checksum import adigest_of_file, digest_of_file, digests_match

__all__ = ["adigest_of_file", "digest_of_file", "digests_match"]
