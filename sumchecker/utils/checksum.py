"""Digest helpers used when checking files against a manifest."""

from __future__ import annotations

import asyncio
import codecs
import hashlib
import os
from typing import IO, AnyStr, Iterator, Optional, Union

from sumchecker.config.options import DEFAULT_CHUNK_SIZE

PathType = Union[str, "os.PathLike[str]"]
TEXT_ERRORS = "surrogateescape"


def new_hasher(algorithm: str) -> "hashlib._Hash":
    """Return a fresh hash object; unknown algorithms raise ``ValueError``."""
    return hashlib.new(algorithm)


def open_for_digest(path: PathType, encoding: Optional[str]) -> IO:
    """Open ``path`` raw (``encoding=None``) or as text without newline translation.

    Undecodable bytes are kept as lone surrogates so re-encoding restores them.
    """
    if encoding is None:
        return open(path, "rb")
    return open(path, "r", encoding=encoding, errors=TEXT_ERRORS, newline="")


def iter_file_chunks(fh: IO[AnyStr], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[AnyStr]:
    return iter(lambda: fh.read(chunk_size), fh.read(0))


class _DigestFeeder:
    """Feeds bytes or decoded text chunks into a hasher."""

    def __init__(self, algorithm: str, encoding: Optional[str]):
        self.hasher = new_hasher(algorithm)
        self.encoder = codecs.getincrementalencoder(encoding)(errors=TEXT_ERRORS) if encoding is not None else None

    def update(self, chunk: Union[bytes, str]) -> None:
        if self.encoder is None:
            self.hasher.update(chunk)
        else:
            self.hasher.update(self.encoder.encode(chunk))

    def hexdigest(self) -> str:
        if self.encoder is not None:
            self.hasher.update(self.encoder.encode("", final=True))
        return self.hasher.hexdigest()


def digest_of_file(
    path: PathType,
    algorithm: str = "sha256",
    *,
    encoding: Optional[str] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Compute the lowercase hex digest of a file, reading it in chunks.

    With ``encoding=None`` the raw bytes are hashed. Otherwise the file is
    decoded with ``encoding`` and each chunk is re-encoded with the same codec
    before hashing.
    """
    feeder = _DigestFeeder(algorithm, encoding)
    with open_for_digest(path, encoding) as fh:
        for chunk in iter_file_chunks(fh, chunk_size):
            feeder.update(chunk)
    return feeder.hexdigest()


async def adigest_of_file(
    path: PathType,
    algorithm: str = "sha256",
    *,
    encoding: Optional[str] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Asynchronous :func:`digest_of_file`; each chunk read runs in a worker thread."""
    feeder = _DigestFeeder(algorithm, encoding)
    fh = await asyncio.to_thread(open_for_digest, path, encoding)
    with fh:
        while True:
            chunk = await asyncio.to_thread(fh.read, chunk_size)
            if not chunk:
                break
            feeder.update(chunk)
    return feeder.hexdigest()


def digests_match(actual: str, expected: str) -> bool:
    """Exact comparison; the recorded digest's case is not normalised."""
    return actual == expected


__all__ = [
    "adigest_of_file",
    "digest_of_file",
    "digests_match",
    "iter_file_chunks",
    "new_hasher",
    "open_for_digest",
]
