"""
RC4 stream cipher, key adapter and chunked streaming helpers.
"""

__all__ = [
    "RC4",
    "RC4Transform",
    "crypt",
    "crypt_file",
    "encode_key",
    "DEFAULT_KEY_ENCODING",
    "ErrorKind",
    "RC4Error",
    "InvalidKey",
    "InvalidChunkType",
    "InvalidSkipCount",
]

from .errors import (
    ErrorKind,
    InvalidChunkType,
    InvalidKey,
    InvalidSkipCount,
    RC4Error,
)
from .keys import DEFAULT_KEY_ENCODING, encode_key
from .rc4 import RC4, crypt
from .stream import RC4Transform, crypt_file
