"""Shared pytest fixtures for stripmentions tests."""

from __future__ import annotations

from pathlib import Path

import pytest

_ENV_KEYS = ("STRIP_BOT_MENTIONS", "STRIP_USER_MENTIONS", "STRIP_OUTPUT_MODE")


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    env_path = tmp_path / ".env"
    monkeypatch.setenv("DOTENV_PATH", str(env_path))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return env_path


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: Path):
    from stripmentions.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def env_path(_isolate_env: Path) -> Path:
    return _isolate_env
