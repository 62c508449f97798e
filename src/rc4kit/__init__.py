from .version import __version__ as __version__

__title__ = "rc4kit"
__description__ = "A small RC4 stream cipher toolkit."
__license__ = "Apache-2.0"
