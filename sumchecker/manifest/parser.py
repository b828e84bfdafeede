"""
Parser for ``sha256sum``-style checksum manifests.

Each line reads ``<hex digest><space><mode marker><filename>`` where the mode
marker is a space (text mode) or ``*`` (binary mode). Filenames run to the end
of the line and may contain spaces.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List

from sumchecker.errors import ChecksumParseError
from sumchecker.manifest.types import Manifest, ManifestEntry

logger = logging.getLogger("sumchecker.manifest.parser")

CHECKSUM_LINE = re.compile(r"^([0-9a-fA-F]+) ([ *])(.+)$")
LINE_SEPARATOR = re.compile(r"[\r\n]+")
BYTE_ORDER_MARK = "\ufeff"


def split_lines(data: str) -> List[str]:
    """Strip the whole text (byte-order marks included), then split on runs of CR/LF."""
    return LINE_SEPARATOR.split(data.strip().strip(BYTE_ORDER_MARK).strip())


def parse_manifest(data: str) -> Manifest:
    """Parse manifest text, raising on the first malformed line.

    Line numbers are 1-based and count the lines left after the outer strip,
    so leading blank lines are not counted. A later entry for the same
    filename replaces an earlier one.
    """

    logger.debug("Parsing checksum file")
    entries: Dict[str, ManifestEntry] = {}
    for line_number, line in enumerate(split_lines(data), start=1):
        match = CHECKSUM_LINE.fullmatch(line)
        if match is None:
            logger.debug("Could not parse line number %d", line_number)
            raise ChecksumParseError(line_number, line)
        digest, marker, filename = match.groups()
        entries[filename] = ManifestEntry(digest=digest, binary=marker == "*")

    manifest = Manifest(entries)
    logger.debug("Parsed checksums: %r", manifest)
    return manifest


__all__ = ["CHECKSUM_LINE", "split_lines", "parse_manifest"]
