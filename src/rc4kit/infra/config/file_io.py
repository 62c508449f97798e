from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from rc4kit.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH
from rc4kit.schemas import CipherConfig

from .adapter import ConfigAdapter

logger = logging.getLogger(__name__)

LOCAL_CONFIG_NAMES = ("settings.toml", "settings.json")


def _candidate_paths(config_path: str | Path | None) -> list[Path]:
    """Settings files to try, in priority order.

    An explicit path is the only candidate when given.
    """
    if config_path:
        return [Path(config_path).expanduser().resolve()]
    return [Path.cwd() / name for name in LOCAL_CONFIG_NAMES] + [SETTING_PATH]


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Read the raw settings mapping.

    Looks at ``config_path`` if given, otherwise ``settings.toml`` and
    ``settings.json`` in the working directory, then ``SETTING_PATH``.

    Raises:
        FileNotFoundError: If no settings file exists.
        ValueError: If the file is not a TOML/JSON table.
    """
    for path in _candidate_paths(config_path):
        if path.is_file():
            break
    else:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading settings from: %s", path)
    raw = path.read_bytes()
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            data = tomllib.loads(raw.decode("utf-8"))
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise ValueError(f"Unsupported settings format: {suffix}")
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings root must be a table, got {type(data).__name__}")
    return data


def load_cipher_config(
    config_path: str | Path | None = None,
    profile: str | None = None,
) -> CipherConfig:
    """Load settings and resolve them into a :class:`CipherConfig`.

    Args:
        config_path: Optional explicit settings file.
        profile: Optional profile name under ``profiles``.

    Raises:
        FileNotFoundError: If no settings file exists.
        KeyError: If ``profile`` is not defined.
        ValueError: If the file or a cipher setting is invalid.
    """
    cfg = ConfigAdapter(load_config(config_path)).get_cipher_config(profile)
    logger.debug(
        "Cipher settings: profile=%s drop=%d chunk_size=%d encoding=%s",
        profile,
        cfg.drop,
        cfg.chunk_size,
        cfg.key_encoding,
    )
    return cfg


def copy_default_config(target: Path) -> None:
    """Write the bundled sample settings to ``target``."""
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
    logger.info("Sample settings copied to: %s", target)
