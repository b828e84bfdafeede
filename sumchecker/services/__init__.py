"""
Service layer running manifest-based file validation.
"""

from .validator import BINARY_ENCODING, ChecksumValidator, validate, validate_sync

__all__ = ["BINARY_ENCODING", "ChecksumValidator", "validate", "validate_sync"]
