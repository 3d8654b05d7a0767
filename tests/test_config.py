from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_defaults():
    settings = AppSettings()
    assert settings.default_base == 0
    assert settings.default_type == "int"
    assert settings.char_signed is True
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STRTOI_DEFAULT_BASE", "16")
    monkeypatch.setenv("STRTOI_DEFAULT_TYPE", "uint8")
    monkeypatch.setenv("STRTOI_CHAR_SIGNED", "false")
    monkeypatch.setenv("strtoi_log_level", "debug")
    settings = AppSettings()
    assert settings.default_base == 16
    assert settings.default_type == "uint8"
    assert settings.char_signed is False
    assert settings.log_level == "DEBUG"


def test_dotenv_in_cwd(isolated_env: Path):
    (isolated_env / ".env").write_text("STRTOI_DEFAULT_TYPE=uint16\n", encoding="utf-8")
    assert AppSettings().default_type == "uint16"


@pytest.mark.parametrize(
    "key,value",
    [
        ("STRTOI_DEFAULT_BASE", "1"),
        ("STRTOI_DEFAULT_BASE", "37"),
        ("STRTOI_DEFAULT_TYPE", "float"),
        ("STRTOI_LOG_LEVEL", "loud"),
    ],
)
def test_invalid_values_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        AppSettings()


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "strtoi-generic"
