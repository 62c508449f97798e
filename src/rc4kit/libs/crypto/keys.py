from __future__ import annotations

from .errors import InvalidKey

DEFAULT_KEY_ENCODING = "utf-8"


def encode_key(
    key: str | bytes | bytearray | memoryview,
    encoding: str = DEFAULT_KEY_ENCODING,
) -> bytes:
    """Convert a text or bytes-like key into key bytes for :class:`RC4`.

    Text is encoded with ``encoding`` (UTF-8 by default, so ``"Key"`` becomes
    ``b"Key"`` and non-ASCII characters expand to multiple bytes). Bytes-like
    values are returned as ``bytes`` unchanged.

    Args:
        key: Key as text or bytes.
        encoding: Codec name used for text keys.

    Returns:
        The key bytes.

    Raises:
        InvalidKey: If the value is neither text nor bytes-like, or the
            resulting key is empty.
        LookupError: If ``encoding`` is not a known codec.
        UnicodeEncodeError: If ``key`` cannot be represented in ``encoding``.
    """
    if isinstance(key, str):
        raw = key.encode(encoding)
    elif isinstance(key, (bytes, bytearray, memoryview)):
        raw = bytes(key)
    else:
        raise InvalidKey(f"Key must be str or bytes, got {type(key).__name__}")

    if not raw:
        raise InvalidKey("Key must not be empty")
    return raw
