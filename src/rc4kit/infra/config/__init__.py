"""
Loading cipher settings from TOML/JSON files.
"""

__all__ = [
    "copy_default_config",
    "load_cipher_config",
    "load_config",
    "ConfigAdapter",
]

from .adapter import ConfigAdapter
from .file_io import copy_default_config, load_cipher_config, load_config
