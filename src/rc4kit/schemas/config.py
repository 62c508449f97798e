"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CipherConfig:
    """Configuration for building RC4 stream transforms.

    Attributes:
        key_encoding: Codec used to turn text keys into key bytes.
        drop: Number of initial keystream bytes to discard (RC4-drop[n]).
        chunk_size: Read size in bytes when transforming file streams.
    """

    key_encoding: str = "utf-8"
    drop: int = 0
    chunk_size: int = 65536
