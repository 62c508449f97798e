from __future__ import annotations

from typing import Any

from .errors import InvalidChunkType, InvalidKey, InvalidSkipCount


def _byte_view(data: Any) -> memoryview:
    """Return a flat unsigned-byte view over ``data``.

    Non-contiguous buffers (e.g. strided memoryview slices) are copied, so the
    returned view is read-only for them.

    Raises:
        InvalidChunkType: If ``data`` does not support the buffer protocol.
    """
    try:
        view = memoryview(data)
    except TypeError:
        raise InvalidChunkType(
            f"expected a bytes-like object, got {type(data).__name__}"
        ) from None
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return view.cast("B")


class RC4:
    """Stateful RC4 stream cipher.

    The key schedule runs once at construction. Every later call to
    :meth:`update`, :meth:`update_into` or :meth:`skip` continues the same
    keystream, so an instance represents exactly one logical stream and must
    not be shared between threads without external locking.

    Encryption and decryption are the same operation::

        ct = RC4(b"Key").update(b"Plaintext")
        assert RC4(b"Key").update(ct) == b"Plaintext"
    """

    __slots__ = ("_box", "_i", "_j")

    def __init__(self, key: bytes) -> None:
        """
        Args:
            key: RC4 key bytes (must not be empty). Text keys have to be
                converted with :func:`rc4kit.libs.crypto.keys.encode_key`.

        Raises:
            InvalidKey: If the key is empty or not bytes-like.
        """
        if isinstance(key, str):
            raise InvalidKey("Key must be bytes, encode text keys first")
        try:
            key_view = memoryview(key).cast("B")
        except TypeError:
            raise InvalidKey(
                f"Key must be bytes-like, got {type(key).__name__}"
            ) from None
        if not key_view:
            raise InvalidKey("Key must not be empty")

        self._box = self._rc4_init(bytes(key_view))
        self._i = 0
        self._j = 0

    @property
    def box(self) -> bytes:
        """Snapshot of the current 256-byte permutation table."""
        return bytes(self._box)

    @property
    def i(self) -> int:
        return self._i

    @property
    def j(self) -> int:
        return self._j

    def update(self, data: bytes | bytearray | memoryview) -> bytes:
        """Encrypts/Decrypts data

        This is the RC4 Pseudo-Random Generation Algorithm (PRGA). The input
        is left untouched; use :meth:`update_into` to XOR in place.

        Args:
            data: Input bytes, either plaintext or ciphertext.

        Returns:
            Output bytes after XOR with the next ``len(data)`` keystream bytes.

        Raises:
            InvalidChunkType: If ``data`` is not bytes-like. The cipher state
                is not advanced.
        """
        view = _byte_view(data)
        if not view:
            return b""

        out = bytearray(view)
        self._apply(out)
        return bytes(out)

    def update_into(self, buffer: bytearray | memoryview) -> bytearray | memoryview:
        """XOR the keystream into a writable buffer in place.

        Callers holding other references to ``buffer`` observe the change.

        Args:
            buffer: A writable bytes-like object (``bytearray``, writable
                ``memoryview``, ...).

        Returns:
            The same ``buffer`` object.

        Raises:
            InvalidChunkType: If ``buffer`` is not bytes-like, read-only or
                not contiguous. The cipher state is not advanced.
        """
        view = _byte_view(buffer)
        if view.readonly:
            raise InvalidChunkType(
                f"{type(buffer).__name__} is not a writable contiguous buffer"
            )
        self._apply(view)
        return buffer

    def skip(self, count: int) -> None:
        """Discard the next ``count`` keystream bytes.

        Args:
            count: Number of keystream bytes to drop (``>= 0``).

        Raises:
            InvalidSkipCount: If ``count`` is negative or not an integer.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidSkipCount(
                f"skip count must be an int, got {type(count).__name__}"
            )
        if count < 0:
            raise InvalidSkipCount(f"skip count must be >= 0, got {count}")

        S = self._box
        i = self._i
        j = self._j
        for _ in range(count):
            i = (i + 1) & 0xFF
            j = (j + S[i]) & 0xFF
            S[i], S[j] = S[j], S[i]
        self._i = i
        self._j = j

    def _apply(self, buf: bytearray | memoryview) -> None:
        S = self._box
        i = self._i
        j = self._j
        for idx in range(len(buf)):
            i = (i + 1) & 0xFF
            j = (j + S[i]) & 0xFF
            S[i], S[j] = S[j], S[i]
            buf[idx] ^= S[(S[i] + S[j]) & 0xFF]
        self._i = i
        self._j = j

    @staticmethod
    def _rc4_init(key: bytes) -> bytearray:
        """Perform the RC4 Key-Scheduling Algorithm (KSA)."""
        S = bytearray(range(256))
        j = 0
        klen = len(key)
        for i in range(256):
            j = (j + S[i] + key[i % klen]) & 0xFF
            S[i], S[j] = S[j], S[i]
        return S


def crypt(key: bytes, data: bytes | bytearray | memoryview, *, drop: int = 0) -> bytes:
    """Encrypt or decrypt ``data`` with a fresh cipher state.

    Args:
        key: RC4 key bytes.
        data: Input bytes.
        drop: Number of initial keystream bytes to discard.

    Returns:
        Output bytes.
    """
    cipher = RC4(key)
    cipher.skip(drop)
    return cipher.update(data)
