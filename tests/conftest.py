from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep settings tests away from the developer's `.env` files and env vars."""

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("STRTOI_"):
            monkeypatch.delenv(key)
    return tmp_path
