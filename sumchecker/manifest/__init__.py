"""
Checksum manifest types and parsing.
"""

from .parser import CHECKSUM_LINE, parse_manifest, split_lines
from .types import Manifest, ManifestEntry

__all__ = ["CHECKSUM_LINE", "Manifest", "ManifestEntry", "parse_manifest", "split_lines"]
