"""
Checksum validator comparing files on disk with a checksum manifest.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import List, Optional, Sequence, Union

from sumchecker.config.options import ChecksumOptions, ValidatorConfig
from sumchecker.errors import ChecksumMismatchError, NoChecksumFoundError
from sumchecker.manifest.parser import parse_manifest
from sumchecker.manifest.types import Manifest
from sumchecker.utils.checksum import TEXT_ERRORS, PathType, adigest_of_file, digests_match

logger = logging.getLogger("sumchecker.services.validator")

# Decodes every byte to the code point of the same value.
BINARY_ENCODING = "latin-1"

FilesToCheck = Union[PathType, Sequence[PathType]]


def _as_file_list(files_to_check: FilesToCheck) -> List[str]:
    if isinstance(files_to_check, (str, os.PathLike)):
        return [os.fspath(files_to_check)]
    return [os.fspath(filename) for filename in files_to_check]


class ChecksumValidator:
    """Validates files against the digests listed in a checksum manifest."""

    def __init__(
        self,
        algorithm: str,
        checksum_filename: PathType,
        options: Optional[ChecksumOptions] = None,
    ):
        self.config = ValidatorConfig.build(algorithm, os.fspath(checksum_filename), options)
        self.checksums = Manifest()

    @property
    def algorithm(self) -> str:
        return self.config.algorithm

    @property
    def checksum_filename(self) -> str:
        return self.config.manifest_path

    @property
    def default_text_encoding(self) -> str:
        return self.config.default_text_encoding

    def encoding(self, binary: bool) -> str:
        return BINARY_ENCODING if binary else self.config.default_text_encoding

    def parse_checksum_file(self, data: str) -> None:
        """Replace the current manifest; on a parse error the previous one is kept."""
        self.checksums = parse_manifest(data)

    async def read_file(self, filename: PathType, binary: bool) -> str:
        encoding = self.encoding(binary)
        logger.debug('Reading "%s" (binary mode: %s)', filename, binary)

        def _read() -> str:
            with open(filename, "r", encoding=encoding, errors=TEXT_ERRORS, newline="") as fh:
                return fh.read()

        return await asyncio.to_thread(_read)

    async def validate(self, base_dir: PathType, files_to_check: FilesToCheck) -> None:
        filenames = _as_file_list(files_to_check)
        data = await self.read_file(self.checksum_filename, False)
        self.parse_checksum_file(data)
        await self.validate_files(base_dir, filenames)

    async def validate_file(self, base_dir: PathType, filename: str) -> None:
        logger.debug("validate_file: %s", filename)

        entry = self.checksums.get(filename)
        if entry is None:
            raise NoChecksumFoundError(filename)

        full_path = os.path.abspath(os.path.join(base_dir, filename))
        encoding = self.encoding(entry.binary)
        logger.debug('Reading file with "%s" encoding', encoding)
        calculated = await adigest_of_file(
            full_path,
            self.config.algorithm,
            encoding=None if entry.binary else encoding,
            chunk_size=self.config.chunk_size,
        )

        logger.debug("Expected checksum: %s; Actual: %s", entry.digest, calculated)
        if not digests_match(calculated, entry.digest):
            raise ChecksumMismatchError(filename)

    async def validate_files(self, base_dir: PathType, files_to_check: Sequence[str]) -> None:
        """Check every file concurrently; the first failure observed is raised."""
        await asyncio.gather(*(self.validate_file(base_dir, filename) for filename in files_to_check))


async def validate(
    algorithm: str,
    checksum_filename: PathType,
    base_dir: PathType,
    files_to_check: FilesToCheck,
    options: Optional[ChecksumOptions] = None,
) -> None:
    """Validate files against a checksum file such as one written by ``sha256sum``.

    ``algorithm`` is any name accepted by :func:`hashlib.new`. ``files_to_check``
    is one path or a sequence of paths relative to ``base_dir``. Raises
    :class:`~sumchecker.errors.ChecksumParseError`,
    :class:`~sumchecker.errors.NoChecksumFoundError` or
    :class:`~sumchecker.errors.ChecksumMismatchError` on validation failures;
    filesystem errors propagate unchanged.

    Usage::

        try:
            await validate("sha256", "SHASUMS256.txt", "downloads", ["app.tar.gz"])
        except SumcheckerError as exc:
            print(f"{exc.kind.value}: {exc}")
    """
    validator = ChecksumValidator(algorithm, checksum_filename, options)
    await validator.validate(base_dir, files_to_check)


def validate_sync(
    algorithm: str,
    checksum_filename: PathType,
    base_dir: PathType,
    files_to_check: FilesToCheck,
    options: Optional[ChecksumOptions] = None,
) -> None:
    """Blocking wrapper around :func:`validate` for callers without an event loop."""
    asyncio.run(validate(algorithm, checksum_filename, base_dir, files_to_check, options))


__all__ = ["BINARY_ENCODING", "ChecksumValidator", "validate", "validate_sync"]
