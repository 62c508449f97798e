from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from pathlib import Path
from typing import Any, BinaryIO

from rc4kit.schemas import CipherConfig

from .keys import encode_key
from .rc4 import RC4

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 65536


class RC4Transform:
    """Chunked adapter around a single :class:`RC4` keystream.

    Chunks are processed strictly in arrival order and share one cipher
    state, so splitting the input differently never changes the output.
    Chunks that are not bytes-like raise
    :class:`~rc4kit.libs.crypto.errors.InvalidChunkType`.
    """

    def __init__(
        self,
        key: bytes,
        *,
        drop: int = 0,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """
        Args:
            key: RC4 key bytes.
            drop: Number of initial keystream bytes to discard.
            chunk_size: Default read size for :meth:`transform_stream`.

        Raises:
            ValueError: If ``chunk_size`` is not positive.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        self._rc4 = RC4(key)
        self._rc4.skip(drop)
        self._chunk_size = chunk_size
        self._processed = 0

    @classmethod
    def from_config(
        cls, key: str | bytes | bytearray | memoryview, cfg: CipherConfig
    ) -> RC4Transform:
        """Build a transform using the encoding, drop and chunk size from ``cfg``."""
        return cls(
            encode_key(key, cfg.key_encoding),
            drop=cfg.drop,
            chunk_size=cfg.chunk_size,
        )

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def bytes_processed(self) -> int:
        """Total number of input bytes transformed so far."""
        return self._processed

    def feed(self, chunk: Any) -> bytes:
        """Transform one chunk.

        Args:
            chunk: Bytes-like chunk. Empty chunks are allowed.

        Returns:
            The transformed chunk.

        Raises:
            InvalidChunkType: If ``chunk`` is not bytes-like.
        """
        out = self._rc4.update(chunk)
        self._processed += len(out)
        return out

    def transform(self, chunks: Iterable[Any]) -> Iterator[bytes]:
        """Lazily transform an iterable of chunks."""
        for chunk in chunks:
            yield self.feed(chunk)

    async def atransform(self, chunks: AsyncIterable[Any]) -> AsyncIterator[bytes]:
        """Lazily transform an async iterable of chunks."""
        async for chunk in chunks:
            yield self.feed(chunk)

    def transform_stream(
        self,
        src: BinaryIO,
        dst: BinaryIO,
        chunk_size: int | None = None,
    ) -> int:
        """Read ``src`` to EOF, writing transformed chunks to ``dst``.

        Args:
            src: Readable binary file object.
            dst: Writable binary file object.
            chunk_size: Read size in bytes, defaults to :attr:`chunk_size`.

        Returns:
            Number of bytes written.

        Raises:
            ValueError: If ``chunk_size`` is not positive.
        """
        if chunk_size is None:
            chunk_size = self._chunk_size
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        total = 0
        while chunk := src.read(chunk_size):
            total += dst.write(self.feed(chunk))
        logger.debug("Transformed %d bytes from stream", total)
        return total


def crypt_file(
    src_path: str | Path,
    dst_path: str | Path,
    key: bytes,
    *,
    drop: int = 0,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Encrypt or decrypt a file into ``dst_path``.

    Args:
        src_path: Input file.
        dst_path: Output file, parent directories are created.
        key: RC4 key bytes.
        drop: Number of initial keystream bytes to discard.
        chunk_size: Read size in bytes.

    Returns:
        Number of bytes written.
    """
    transform = RC4Transform(key, drop=drop, chunk_size=chunk_size)
    src = Path(src_path)
    dst = Path(dst_path)
    dst.parent.mkdir(parents=True, exist_ok=True)

    logger.debug("RC4 %s -> %s (drop=%d)", src, dst, drop)
    with src.open("rb") as fin, dst.open("wb") as fout:
        total = transform.transform_stream(fin, fout)
    logger.info("Wrote %d bytes to %s", total, dst)
    return total
