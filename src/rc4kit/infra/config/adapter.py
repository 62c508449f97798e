from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

from rc4kit.schemas import CipherConfig


class ConfigAdapter:
    """High-level accessor for general and profile-specific cipher settings.

    All configuration resolution follows the order:

    **general -> profile -> built-in defaults**

    Args:
        config (dict[str, Any]): Fully loaded configuration mapping containing
            a ``general`` block and optionally a ``profiles`` block.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_cipher_config(self, profile: str | None = None) -> CipherConfig:
        """Build a CipherConfig by merging general and profile overrides.

        Args:
            profile (str | None): Profile name under ``profiles``; None uses
                only the general block.

        Returns:
            CipherConfig: Resolved cipher configuration.

        Raises:
            KeyError: If ``profile`` is given but not defined.
            ValueError: If a resolved value is out of range or of the wrong
                type.
        """
        general_cfg = self._gen_cfg()
        profile_cfg = self._profile_cfg(profile) if profile else {}
        cfg = {**general_cfg, **profile_cfg}

        key_encoding = cfg.get("key_encoding", "utf-8")
        drop = cfg.get("drop", 0)
        chunk_size = cfg.get("chunk_size", 65536)

        if not isinstance(key_encoding, str):
            raise ValueError(
                f"key_encoding must be str, got {type(key_encoding).__name__}"
            )
        try:
            codecs.lookup(key_encoding)
        except LookupError:
            raise ValueError(f"Unknown key_encoding: {key_encoding!r}") from None

        if isinstance(drop, bool) or not isinstance(drop, int) or drop < 0:
            raise ValueError(f"drop must be a non-negative int, got {drop!r}")

        if (
            isinstance(chunk_size, bool)
            or not isinstance(chunk_size, int)
            or chunk_size <= 0
        ):
            raise ValueError(f"chunk_size must be a positive int, got {chunk_size!r}")

        return CipherConfig(
            key_encoding=key_encoding,
            drop=drop,
            chunk_size=chunk_size,
        )

    def get_profiles(self) -> list[str]:
        """Return the names of all defined profiles.

        Returns:
            list[str]: Profile names in definition order.
        """
        profiles = self._config.get("profiles") or {}
        if not isinstance(profiles, dict):
            return []
        return [name for name, value in profiles.items() if isinstance(value, dict)]

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        debug_cfg = self._gen_cfg().get("debug") or {}
        return debug_cfg.get("log_level") or "INFO"

    def get_log_dir(self) -> Path | None:
        """Return directory for log files.

        Returns:
            Path | None: Absolute log directory path, or None when file
            logging is not configured.
        """
        debug_cfg = self._gen_cfg().get("debug") or {}
        log_dir = debug_cfg.get("log_dir")
        if not log_dir:
            return None
        return Path(log_dir).expanduser().resolve()

    def _gen_cfg(self) -> dict[str, Any]:
        general = self._config.get("general")
        return general if isinstance(general, dict) else {}

    def _profile_cfg(self, profile: str) -> dict[str, Any]:
        profiles = self._config.get("profiles") or {}
        value = profiles.get(profile) if isinstance(profiles, dict) else None
        if not isinstance(value, dict):
            raise KeyError(f"Unknown profile: {profile!r}")
        return value
