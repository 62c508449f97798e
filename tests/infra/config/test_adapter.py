from pathlib import Path

import pytest

from rc4kit.infra.config.adapter import ConfigAdapter
from rc4kit.schemas import CipherConfig


@pytest.fixture
def sample_config(tmp_path) -> dict:
    """Construct a representative configuration mapping for tests."""
    return {
        "general": {
            "key_encoding": "latin-1",
            "drop": 256,
            "chunk_size": 4096,
            "debug": {
                "log_level": "DEBUG",
                "log_dir": str(tmp_path / "logs"),
            },
        },
        "profiles": {
            "rc4-drop768": {"drop": 768},
            "utf8": {"key_encoding": "utf-8", "chunk_size": 1024},
            "broken": "not-a-table",
        },
    }


@pytest.fixture
def adapter(sample_config) -> ConfigAdapter:
    return ConfigAdapter(sample_config)


# ================================================================
# cipher config resolution
# ================================================================


def test_general_only(adapter):
    assert adapter.get_cipher_config() == CipherConfig(
        key_encoding="latin-1", drop=256, chunk_size=4096
    )


def test_profile_overrides_general(adapter):
    cfg = adapter.get_cipher_config("rc4-drop768")
    assert cfg == CipherConfig(key_encoding="latin-1", drop=768, chunk_size=4096)


def test_profile_partial_override(adapter):
    cfg = adapter.get_cipher_config("utf8")
    assert cfg.key_encoding == "utf-8"
    assert cfg.chunk_size == 1024
    assert cfg.drop == 256


def test_defaults_when_empty():
    assert ConfigAdapter({}).get_cipher_config() == CipherConfig()


def test_non_dict_general_ignored():
    assert ConfigAdapter({"general": "nope"}).get_cipher_config() == CipherConfig()


@pytest.mark.parametrize("name", ["missing", "broken"])
def test_unknown_profile_raises(adapter, name):
    with pytest.raises(KeyError):
        adapter.get_cipher_config(name)


@pytest.mark.parametrize(
    "general",
    [
        {"drop": -1},
        {"drop": "768"},
        {"drop": True},
        {"chunk_size": 0},
        {"chunk_size": -5},
        {"chunk_size": 1.5},
        {"key_encoding": 8},
        {"key_encoding": "no-such-codec"},
    ],
)
def test_invalid_values_rejected(general):
    with pytest.raises(ValueError):
        ConfigAdapter({"general": general}).get_cipher_config()


def test_get_profiles(adapter):
    assert adapter.get_profiles() == ["rc4-drop768", "utf8"]


def test_get_profiles_missing():
    assert ConfigAdapter({}).get_profiles() == []


def test_get_config_returns_copy_of_input(sample_config):
    adapter = ConfigAdapter(sample_config)
    assert adapter.get_config() == sample_config
    assert adapter.get_config() is not sample_config


# ================================================================
# logging settings
# ================================================================


def test_log_settings(adapter, tmp_path):
    assert adapter.get_log_level() == "DEBUG"
    assert adapter.get_log_dir() == Path(tmp_path / "logs").resolve()


def test_log_settings_defaults():
    adapter = ConfigAdapter({"general": {}})
    assert adapter.get_log_level() == "INFO"
    assert adapter.get_log_dir() is None
